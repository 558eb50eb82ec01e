"""
Lifelog importer: legacy life-logging SQLite databases to canonical journal entries.
"""
__version__ = "0.3.0"
