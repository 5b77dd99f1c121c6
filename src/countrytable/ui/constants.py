# Pagination constants
PAGE_SIZE = 15  # Number of countries appended per page

# Infinite scroll constants
SCROLL_DEBOUNCE_MS = 1000  # Quiet period before a burst of scroll events is evaluated

# Sort indicator glyphs shown on the active column header
SORT_ASCENDING_ICON = "▲"
SORT_DESCENDING_ICON = "▼"

# Placeholder for a missing numeric value
MISSING_VALUE = "n/a"
