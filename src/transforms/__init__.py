"""Dataframe transforms over cached CSV files."""
