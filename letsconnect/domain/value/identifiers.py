"""Strongly typed identifiers for lets-connect domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Content entity identifiers
PostId = NewType("PostId", UUID)
GalleryPostId = NewType("GalleryPostId", UUID)
EventId = NewType("EventId", UUID)
DeletedPostId = NewType("DeletedPostId", UUID)

# Engagement identifiers (unique within their parent)
CommentId = NewType("CommentId", UUID)
ReplyId = NewType("ReplyId", UUID)

UserId = NewType("UserId", UUID)

# Social identifiers
NotificationId = NewType("NotificationId", UUID)
ReportId = NewType("ReportId", UUID)
