# prefix_search/paths.py

import os

# --- Base data location (directory or http(s) base URL) ---
DATA_DIR = os.getenv("PREFIX_SEARCH_DATA", "data")

# --- Corpus artifacts (precomputed, loaded once) ---
WORDS_FILE = "words.json"            # sorted dictionary
WORD_FREQ_FILE = "word_freq.json"    # token -> occurrence count
WORD_INDEX_FILE = "word_index.json"  # token -> [doc ids]
PROJECTS_FILE = "projects.json"      # doc id -> display name

# --- Query / autocomplete limits ---
QUERY_EXPANSION_LIMIT = 1000
AUTOCOMPLETE_LIMIT = 20
AUTOCOMPLETE_EXPANSION_LIMIT = 10000
MIN_FRAGMENT_LENGTH = 2

# --- Display ---
RESULTS_PER_PAGE = 50
MAX_PAGE_BUTTONS = 7

# --- Remote loading ---
HTTP_TIMEOUT = 30
