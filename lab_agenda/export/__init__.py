"""Export of record sets to spreadsheet files."""
