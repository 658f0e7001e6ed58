"""Field names shared by every collection"""


class CommonFields:
    """Field name constants present on every document"""
    MONGO_ID = "_id"
    OWNER = "owner"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class MediaFields:
    """Field name constants for embedded media assets"""
    URL = "url"
    PUBLIC_ID = "publicId"
    RESOURCE_TYPE = "resourceType"
