from .user import User
from .friendship import FriendRequest, FriendRequestStatus
