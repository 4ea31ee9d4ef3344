# Domain-Modelle und Zusammenfuehrung der Kartendaten
