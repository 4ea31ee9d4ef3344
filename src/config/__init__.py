# Konfiguration: Formatkonstanten und Logging
