"""Unit tests for users and roles."""

from shopcart.domain.model.user import Role, User


def test_default_user_is_a_guest_shopper():
    user = User()
    assert user.username == "guest"
    assert user.role is Role.USER
    assert not user.can_manage_catalog


def test_admin_can_manage_catalog():
    assert User("root", role=Role.ADMIN).can_manage_catalog


def test_role_display_names():
    assert Role.USER.value == "User"
    assert Role.ADMIN.value == "Admin"
