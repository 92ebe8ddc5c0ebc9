"""Classify uploaded ad creatives and record them in a shared spreadsheet."""
