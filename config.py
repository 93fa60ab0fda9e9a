"""Configure the file paths used by the cmudict_db command line."""

DATABASE = "cmudict.0.7a.sqlite"
"""Path to the dictionary database"""

DICTIONARY_FILE = "cmudict.0.7a"
"""Path to the CMU Pronouncing Dictionary text file to import"""

OUTPUT_DIR = "output"
"""Path to the output folder for the log file and reports"""
