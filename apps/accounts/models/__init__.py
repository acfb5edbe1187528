from .role import Role
from .dept import Dept
from .post import Post
from .role_menu import RoleMenu
from .user import User

__all__ = ["Role", "Dept", "Post", "RoleMenu", "User"]
