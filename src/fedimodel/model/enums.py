"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityType(StrEnum):
    """Known ActivityStreams type tags, as they appear in the ``type`` property."""

    # Core
    OBJECT = "Object"
    LINK = "Link"
    ACTIVITY = "Activity"
    INTRANSITIVE_ACTIVITY = "IntransitiveActivity"
    COLLECTION = "Collection"
    ORDERED_COLLECTION = "OrderedCollection"
    COLLECTION_PAGE = "CollectionPage"
    ORDERED_COLLECTION_PAGE = "OrderedCollectionPage"

    # Objects
    ARTICLE = "Article"
    AUDIO = "Audio"
    DOCUMENT = "Document"
    EVENT = "Event"
    IMAGE = "Image"
    NOTE = "Note"
    PAGE = "Page"
    PLACE = "Place"
    PROFILE = "Profile"
    QUESTION = "Question"
    RELATIONSHIP = "Relationship"
    TOMBSTONE = "Tombstone"
    VIDEO = "Video"

    # Links
    MENTION = "Mention"

    # Actors
    APPLICATION = "Application"
    GROUP = "Group"
    ORGANIZATION = "Organization"
    PERSON = "Person"
    SERVICE = "Service"

    # Activities
    ACCEPT = "Accept"
    ADD = "Add"
    ANNOUNCE = "Announce"
    BLOCK = "Block"
    CREATE = "Create"
    DELETE = "Delete"
    DISLIKE = "Dislike"
    FLAG = "Flag"
    FOLLOW = "Follow"
    LIKE = "Like"
    MOVE = "Move"
    REJECT = "Reject"
    REMOVE = "Remove"
    UNDO = "Undo"
    UPDATE = "Update"
    VIEW = "View"

    # Extensions seen in the wild (Mastodon, PeerTube)
    EMOJI = "Emoji"
    HASHTAG = "Hashtag"
    PROPERTY_VALUE = "PropertyValue"
    CACHE_FILE = "CacheFile"
