"""Flip protocol shared by every toggle endpoint.

Toggles never accept a target state: each call inverts the stored value
and reports the state it landed on.
"""

from letsconnect.domain.value import AllowFlag, UserFlag
from letsconnect.domain.value.common import ValueObject


class ToggleOutcome(ValueObject):
    """New state after a flip, with the message shown to the caller."""

    state: bool
    message: str


def like_outcome(subject: str, liked: bool) -> ToggleOutcome:
    verb = "Liked" if liked else "Disliked"
    return ToggleOutcome(state=liked, message=f"{subject} {verb} Successfully")


def allow_outcome(flag: AllowFlag, allowed: bool) -> ToggleOutcome:
    subject = "Comments" if flag == AllowFlag.COMMENTS else "Sharing"
    state = "On" if allowed else "Off"
    return ToggleOutcome(state=allowed, message=f"{subject} Are {state} Now")


def attendance_outcome(attending: bool) -> ToggleOutcome:
    if attending:
        message = "Congratulations You Are Successfully Added In This Event"
    else:
        message = "You Are Successfully Removed From This Event"
    return ToggleOutcome(state=attending, message=message)


_USER_FLAG_SUBJECTS = {
    UserFlag.IS_BANNED: ("User Is Banned Now", "User Is Unbanned Now"),
    UserFlag.SHOW_POINTS: ("Points Are Visible Now", "Points Are Hidden Now"),
    UserFlag.SHOW_BADGES: ("Badges Are Visible Now", "Badges Are Hidden Now"),
}


def user_flag_outcome(flag: UserFlag, state: bool) -> ToggleOutcome:
    on_message, off_message = _USER_FLAG_SUBJECTS[flag]
    return ToggleOutcome(state=state, message=on_message if state else off_message)


def follow_outcome(following: bool) -> ToggleOutcome:
    verb = "Followed" if following else "Unfollowed"
    return ToggleOutcome(state=following, message=f"{verb} Successfully")
