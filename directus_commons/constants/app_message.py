class AppMessage:
    BASE_URI_REQUIRED = "base URI must not be empty"
    NOT_INITIALIZED = "builder has not been constructed with a base URI"
    FIELD_REQUIRED = "filter field name must be a non-empty string"
    RESOURCE_NOT_IMPLEMENTED = "resource '{path}' is not implemented by this client yet, calling it anyway"
    UNKNOWN_RESOURCE = "unknown resource '{name}'"
    ENV_MISSING = "{key} not found"
    REQUEST_FAILED = "{method} {uri} failed with status {status}"
    REQUEST_NOT_SENT = "{method} {uri} could not be sent: {reason}"
    COLLECTION_REQUIRED = "collection name is required"
    ITEM_ID_REQUIRED = "item id is required"
    FILE_ID_REQUIRED = "file id is required"
    DOT_SEGMENT = "path segment '{segment}' is not allowed"
    RESPONSE_NOT_JSON = "{method} {uri} returned status {status} with a body that is not JSON"
    ENV_INVALID_NUMBER = "{key} must be a number, got '{value}'"
