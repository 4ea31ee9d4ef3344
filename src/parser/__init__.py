# Parser-Kern fuer KVK- (TLV) und eGK-Rohdaten (komprimiertes XML)
