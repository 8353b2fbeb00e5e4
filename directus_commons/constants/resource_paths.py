class ResourcePaths:
    ITEMS = "Items"
    FILES = "Files"
    FOLDERS = "Folders"
    COLLECTIONS = "Collections"
    FIELDS = "Fields"
    USERS = "Users"
    ROLES = "Roles"
    PERMISSIONS = "Permissions"
    ACTIVITY = "Activity"
    REVISIONS = "Revisions"
    PRESETS = "Presets"
    RELATIONS = "Relations"
    SETTINGS = "Settings"
    SERVER = "Server"
    UTILS = "Utils"

    # logical name -> (url segment, implemented)
    DEFAULTS = {
        ITEMS: ("items", True),
        FILES: ("files", True),
        FOLDERS: ("folders", True),
        COLLECTIONS: ("collections", True),
        FIELDS: ("fields", True),
        USERS: ("users", True),
        ROLES: ("roles", True),
        PERMISSIONS: ("permissions", True),
        ACTIVITY: ("activity", True),
        REVISIONS: ("revisions", True),
        PRESETS: ("presets", False),
        RELATIONS: ("relations", False),
        SETTINGS: ("settings", True),
        SERVER: ("server", True),
        UTILS: ("utils", False),
    }
