class AppConstants:
    VERSION = "0.1.0"
    USER_AGENT = f"directus-commons/{VERSION}"
    PATH_SEPARATOR = "/"
    QUERY_PREFIX = "?"
    QUERY_JOINER = "&"
    LIST_SEPARATOR = ","

    # query parameter names
    FIELDS = "fields"
    FILTER = "filter"
    SEARCH = "search"
    SORT = "sort"
    LIMIT = "limit"
    OFFSET = "offset"
    PAGE = "page"
    VERSION_PARAM = "version"
    META = "meta"
    DEEP = "deep"

    # characters left unescaped in query values and path segments
    QUERY_SAFE_CHARS = ",-_.~:*$!()"
    SEGMENT_SAFE_CHARS = "-_.~:@"
    DOT_SEGMENTS = (".", "..")

    # response envelope
    DATA = "data"
    ERRORS = "errors"

    # headers
    AUTHORIZATION = "Authorization"
    USER_AGENT_HEADER = "User-Agent"
    ACCEPT = "Accept"
    JSON_CONTENT_TYPE = "application/json"
    OCTET_STREAM = "application/octet-stream"
    AUTH_HEADER_TEMPLATES = {
        AUTHORIZATION: "Bearer {token}",
        USER_AGENT_HEADER: "{user_agent}",
        ACCEPT: JSON_CONTENT_TYPE,
    }

    # environment
    ENV_URL = "DIRECTUS_URL"
    ENV_TOKEN = "DIRECTUS_TOKEN"
    ENV_TIMEOUT = "DIRECTUS_TIMEOUT"
    DEFAULT_TIMEOUT = 30.0

    # files
    FILE = "file"
    TITLE = "title"
    FOLDER = "folder"
