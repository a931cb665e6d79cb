"""Pure helpers for composite ids and lists of IdNamePair records."""
