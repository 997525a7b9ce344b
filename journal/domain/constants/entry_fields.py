"""Constants for Entry model field names"""


class EntryFields:
    """Field name constants for Entry documents"""
    OWNER_ID = "owner_id"
    CONTENT = "content"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
