# Environment variables
ENV_API_KEY = "GSEARCH_API_KEY"
ENV_REFERER = "GSEARCH_REFERER"
ENV_TIMEOUT = "GSEARCH_TIMEOUT"

# Endpoints
SEARCH_BASE_ADDRESS = "http://ajax.googleapis.com/ajax/services/search"
WEB_SEARCH_ADDRESS = f"{SEARCH_BASE_ADDRESS}/web"
LOCAL_SEARCH_ADDRESS = f"{SEARCH_BASE_ADDRESS}/local"
VIDEO_SEARCH_ADDRESS = f"{SEARCH_BASE_ADDRESS}/video"
BLOG_SEARCH_ADDRESS = f"{SEARCH_BASE_ADDRESS}/blogs"
NEWS_SEARCH_ADDRESS = f"{SEARCH_BASE_ADDRESS}/news"
BOOK_SEARCH_ADDRESS = f"{SEARCH_BASE_ADDRESS}/books"
IMAGE_SEARCH_ADDRESS = f"{SEARCH_BASE_ADDRESS}/images"
PATENT_SEARCH_ADDRESS = f"{SEARCH_BASE_ADDRESS}/patent"

# Arguments
DEFAULT_API_VERSION = "1.0"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_REFERER = "Referer"
