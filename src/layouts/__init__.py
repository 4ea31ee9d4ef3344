# Layout-Metadaten der Kartenformate (KVK-Tags, eGK-Elemente)
