import io
import shutil
import tempfile
from unittest import mock

from django.contrib import admin
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import RequestFactory, TestCase, override_settings
from django.utils import timezone
from openpyxl import load_workbook
from rest_framework import status
from rest_framework.test import APITestCase

from apps.common.utils import parse_ids
from .admin import UserAdmin
from .exports import USER_EXPORT_COLUMNS, export_users
from .models import User, Role, Dept, Post

BASE_URL = "/api/system/user/"


class UserModelTest(TestCase):
    """User 모델 / 매니저 테스트"""

    def setUp(self):
        self.admin_role = Role.objects.create(role_name="관리자", role_key="admin")

    def test_create_user_hashes_password(self):
        user = User.objects.create_user(username="user1", password="testpass123")

        self.assertNotEqual(user.password, "testpass123")
        self.assertTrue(user.check_password("testpass123"))

    def test_create_superuser_gets_admin_role(self):
        user = User.objects.create_superuser(username="root", password="testpass123")

        self.assertEqual(user.role, self.admin_role)
        self.assertTrue(user.is_staff)
        self.assertTrue(user.is_superuser)

    def test_is_active_follows_status(self):
        user = User.objects.create_user(username="user1", password="testpass123")
        self.assertTrue(user.is_active)

        user.status = "1"
        self.assertFalse(user.is_active)

    def test_parse_ids(self):
        self.assertEqual(parse_ids("1,2,3"), [1, 2, 3])
        self.assertEqual(parse_ids("1,,2"), [1, 2])
        self.assertEqual(parse_ids(""), [])
        with self.assertRaises(ValueError):
            parse_ids("1,a")

    def test_parse_ids_out_of_range(self):
        with self.assertRaises(ValueError):
            parse_ids("99999999999999999999")
        with self.assertRaises(ValueError):
            parse_ids("0")
        with self.assertRaises(ValueError):
            parse_ids("1,-3")


class UserAdminUnlockTest(TestCase):
    """admin 에서 잠금 해제 시 실패 횟수 초기화 테스트"""

    def setUp(self):
        self.user = User.objects.create_user(
            username="locked",
            password="testpass123",
            failed_login_count=5,
            is_locked=True,
            locked_at=timezone.now(),
        )
        self.model_admin = UserAdmin(User, admin.site)
        self.request = RequestFactory().post("/admin/")

    def test_unlock_resets_counter(self):
        self.user.is_locked = False

        self.model_admin.save_model(self.request, self.user, mock.Mock(changed_data=["is_locked"]), change=True)

        self.user.refresh_from_db()
        self.assertFalse(self.user.is_locked)
        self.assertEqual(self.user.failed_login_count, 0)
        self.assertIsNone(self.user.locked_at)

    def test_other_changes_keep_counter(self):
        self.user.nick_name = "변경"

        self.model_admin.save_model(self.request, self.user, mock.Mock(changed_data=["nick_name"]), change=True)

        self.user.refresh_from_db()
        self.assertTrue(self.user.is_locked)
        self.assertEqual(self.user.failed_login_count, 5)

    def test_lock_fields_shown(self):
        fields = [f for _, opts in self.model_admin.fieldsets for f in opts["fields"]]

        for name in ("is_locked", "failed_login_count", "locked_at"):
            self.assertIn(name, fields)


class SysUserApiTestBase(APITestCase):

    def setUp(self):
        self.role = Role.objects.create(role_name="관리자", role_key="admin", sort=1)
        self.role2 = Role.objects.create(role_name="일반", role_key="common", sort=2)
        self.post = Post.objects.create(post_name="팀장", post_code="leader", sort=1)
        self.post2 = Post.objects.create(post_name="사원", post_code="staff", sort=2)
        self.dept = Dept.objects.create(dept_name="개발팀")
        self.dept2 = Dept.objects.create(dept_name="운영팀")

        self.admin = User.objects.create_user(
            username="admin",
            password="testpass123",
            nick_name="관리자",
            phone="010-1111-2222",
            role=self.role,
            dept=self.dept,
            post=self.post,
            role_ids=f"{self.role.id}",
            post_ids=f"{self.post.id}",
        )
        self.client.force_authenticate(user=self.admin)


class SysUserListTest(SysUserApiTestBase):
    """사용자 목록 조회 테스트"""

    def setUp(self):
        super().setUp()
        for i in range(12):
            User.objects.create_user(
                username=f"user{i:02d}",
                password="testpass123",
                phone=f"010-0000-{i:04d}",
                status="1" if i % 3 == 0 else "0",
                dept=self.dept2 if i < 4 else self.dept,
            )

    def test_default_paging(self):
        response = self.client.get(f"{BASE_URL}sysUserList/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["total"], 13)
        self.assertEqual(response.data["pageNum"], 1)
        self.assertEqual(response.data["pageSize"], 10)
        self.assertEqual(len(response.data["data"]), 10)
        self.assertEqual(response.data["data"][0]["username"], "admin")

    def test_page_size(self):
        response = self.client.get(f"{BASE_URL}sysUserList/", {"pageNum": 3, "pageSize": 5})

        self.assertEqual(response.data["pageNum"], 3)
        self.assertEqual(len(response.data["data"]), 3)

    def test_filters(self):
        response = self.client.get(f"{BASE_URL}sysUserList/", {"username": "USER0"})
        self.assertEqual(response.data["total"], 10)

        response = self.client.get(f"{BASE_URL}sysUserList/", {"status": "1"})
        self.assertEqual(response.data["total"], 4)

        response = self.client.get(f"{BASE_URL}sysUserList/", {"phone": "0000-001"})
        self.assertEqual(response.data["total"], 2)

        response = self.client.get(f"{BASE_URL}sysUserList/", {"deptId": self.dept2.id})
        self.assertEqual(response.data["total"], 4)

        # deptId=0 은 전체
        response = self.client.get(f"{BASE_URL}sysUserList/", {"deptId": 0})
        self.assertEqual(response.data["total"], 13)

    def test_serialized_fields(self):
        response = self.client.get(f"{BASE_URL}sysUserList/", {"username": "admin"})
        row = response.data["data"][0]

        self.assertEqual(row["dept_name"], "개발팀")
        self.assertEqual(row["role_id"], self.role.id)
        self.assertNotIn("password", row)

    def test_requires_login(self):
        self.client.force_authenticate(user=None)

        response = self.client.get(f"{BASE_URL}sysUserList/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class SysUserCrudTest(SysUserApiTestBase):
    """사용자 생성/수정/상태 변경/삭제 테스트"""

    def test_create_user(self):
        response = self.client.post(f"{BASE_URL}sysUser/", {
            "username": "newuser",
            "password": "newpass123",
            "nick_name": "신규",
            "role": self.role2.id,
            "post": self.post2.id,
            "dept": self.dept.id,
        }, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["create_by"], "admin")
        self.assertNotIn("password", response.data)

        user = User.objects.get(username="newuser")
        self.assertTrue(user.check_password("newpass123"))
        self.assertEqual(user.role_ids, str(self.role2.id))
        self.assertEqual(user.post_ids, str(self.post2.id))

    def test_create_duplicate_username(self):
        response = self.client.post(f"{BASE_URL}sysUser/", {
            "username": "admin",
            "password": "newpass123",
        }, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "ERR_101")
        self.assertEqual(response.data["error"]["field"], "username")

    def test_create_invalid_role_ids(self):
        response = self.client.post(f"{BASE_URL}sysUser/", {
            "username": "newuser",
            "password": "newpass123",
            "role_ids": "1,a",
        }, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["field"], "role_ids")

    def test_update_user(self):
        user = User.objects.create_user(username="user1", password="testpass123")

        response = self.client.put(f"{BASE_URL}sysUser/", {
            "id": user.id,
            "nick_name": "변경",
            "password": "",
            "role": self.role2.id,
        }, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        user.refresh_from_db()
        self.assertEqual(user.nick_name, "변경")
        self.assertEqual(user.role, self.role2)
        self.assertEqual(user.update_by, "admin")
        # 빈 비밀번호는 변경하지 않음
        self.assertTrue(user.check_password("testpass123"))

    def test_update_password(self):
        user = User.objects.create_user(username="user1", password="testpass123")

        self.client.put(f"{BASE_URL}sysUser/", {"id": user.id, "password": "changed123"}, format="json")

        user.refresh_from_db()
        self.assertTrue(user.check_password("changed123"))

    def test_update_unknown_user(self):
        response = self.client.put(f"{BASE_URL}sysUser/", {"id": 9999, "nick_name": "x"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"]["code"], "ERR_201")

    def test_change_status(self):
        user = User.objects.create_user(username="user1", password="testpass123")

        response = self.client.put(f"{BASE_URL}sysUser/changeStatus/", {"id": user.id, "status": "1"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        user.refresh_from_db()
        self.assertEqual(user.status, "1")
        self.assertFalse(user.is_active)

    def test_change_status_invalid(self):
        user = User.objects.create_user(username="user1", password="testpass123")

        response = self.client.put(f"{BASE_URL}sysUser/changeStatus/", {"id": user.id, "status": "9"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["field"], "status")

    def test_get_user(self):
        user = User.objects.create_user(
            username="user1", password="testpass123",
            role_ids=f"{self.role.id},{self.role2.id}", post_ids=f"{self.post2.id}",
        )

        response = self.client.get(f"{BASE_URL}sysUser/{user.id}/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["username"], "user1")
        self.assertEqual(response.data["roleIds"], f"{self.role.id},{self.role2.id}")
        self.assertEqual(response.data["postIds"], f"{self.post2.id}")
        self.assertEqual(len(response.data["roles"]), 2)
        self.assertEqual(len(response.data["posts"]), 2)

    def test_get_unknown_user(self):
        response = self.client.get(f"{BASE_URL}sysUser/9999/")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_out_of_range_id(self):
        huge = "99999999999999999999"

        response = self.client.get(f"{BASE_URL}sysUser/{huge}/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"]["code"], "ERR_201")

        response = self.client.put(f"{BASE_URL}sysUser/", {"id": int(huge), "nick_name": "x"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

        response = self.client.delete(f"{BASE_URL}sysUser/{huge}/")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "ERR_101")

    def test_delete_users(self):
        u1 = User.objects.create_user(username="user1", password="testpass123")
        u2 = User.objects.create_user(username="user2", password="testpass123")

        response = self.client.delete(f"{BASE_URL}sysUser/{u1.id},{u2.id}/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["deleted"], 2)
        self.assertFalse(User.objects.filter(pk__in=[u1.id, u2.id]).exists())

    def test_delete_self_forbidden(self):
        response = self.client.delete(f"{BASE_URL}sysUser/{self.admin.id}/")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"]["code"], "ERR_002")
        self.assertTrue(User.objects.filter(pk=self.admin.id).exists())

    def test_delete_malformed_ids(self):
        response = self.client.delete(f"{BASE_URL}sysUser/1,abc/")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "ERR_101")


class SysUserProfileTest(SysUserApiTestBase):
    """개인 정보 / 아바타 / 비밀번호 변경 테스트"""

    def test_profile(self):
        response = self.client.get(f"{BASE_URL}profile/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["username"], "admin")
        self.assertEqual(response.data["roleIds"], [self.role.id])
        self.assertEqual(response.data["postIds"], [self.post.id])
        self.assertEqual(response.data["roles"][0]["role_key"], "admin")
        self.assertEqual(response.data["posts"][0]["post_code"], "leader")
        self.assertEqual(response.data["dept"][0]["dept_name"], "개발팀")

    def test_avatar_upload(self):
        media_root = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, media_root, ignore_errors=True)

        first = SimpleUploadedFile("a.png", b"first", content_type="image/png")
        second = SimpleUploadedFile("b.png", b"second", content_type="image/png")

        with override_settings(MEDIA_ROOT=media_root):
            with self.assertLogs("apps.accounts.views", level="INFO") as logs:
                response = self.client.post(
                    f"{BASE_URL}profileAvatar/", {"upload[]": [first, second]}, format="multipart"
                )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        avatar = response.data["avatar"]
        self.assertTrue(avatar.startswith("/media/uploadfile/"))
        self.assertTrue(avatar.endswith(".jpg"))
        self.assertEqual(len([line for line in logs.output if "아바타 업로드" in line]), 2)

        self.admin.refresh_from_db()
        self.assertEqual(self.admin.avatar, avatar)

    def test_avatar_without_file(self):
        response = self.client.post(f"{BASE_URL}profileAvatar/", {}, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "ERR_101")

    def test_change_password(self):
        response = self.client.post(f"{BASE_URL}updatePwd/", {
            "oldPassword": "testpass123",
            "newPassword": "newpass456",
        }, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.admin.refresh_from_db()
        self.assertTrue(self.admin.check_password("newpass456"))

    def test_change_password_wrong_old(self):
        response = self.client.post(f"{BASE_URL}updatePwd/", {
            "oldPassword": "wrong",
            "newPassword": "newpass456",
        }, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["field"], "oldPassword")

    def test_change_password_same(self):
        response = self.client.post(f"{BASE_URL}updatePwd/", {
            "oldPassword": "testpass123",
            "newPassword": "testpass123",
        }, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["field"], "newPassword")


class RolePostLookupTest(SysUserApiTestBase):
    """역할/직위 조회 테스트"""

    def test_get_init(self):
        response = self.client.get(f"{BASE_URL}getInit/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([r["role_key"] for r in response.data["roles"]], ["admin", "common"])
        self.assertEqual([p["post_code"] for p in response.data["posts"]], ["leader", "staff"])

    def test_get_role_post_skips_unknown_ids(self):
        self.admin.role_ids = f"{self.role2.id},,9999,{self.role.id}"
        self.admin.post_ids = f"{self.post2.id},x"
        self.admin.save()

        response = self.client.get(f"{BASE_URL}getRoPo/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([r["role_key"] for r in response.data["roles"]], ["common", "admin"])
        self.assertEqual([p["post_code"] for p in response.data["posts"]], ["staff"])

    def test_get_role_post_query_count(self):
        extra = [Role.objects.create(role_name=f"역할{i}", role_key=f"role{i}") for i in range(5)]
        self.admin.role_ids = ",".join(str(r.id) for r in reversed(extra))
        self.admin.post_ids = f"{self.post2.id},{self.post.id},99999999999999999999"
        self.admin.save()

        # 역할 1회 + 직위 1회
        with self.assertNumQueries(2):
            response = self.client.get(f"{BASE_URL}getRoPo/")

        self.assertEqual([r["role_key"] for r in response.data["roles"]], [f"role{i}" for i in range(4, -1, -1)])
        self.assertEqual([p["post_code"] for p in response.data["posts"]], ["staff", "leader"])


class SysUserExportTest(SysUserApiTestBase):
    """사용자 Excel 내보내기 테스트"""

    def read_workbook(self, content):
        sheet = load_workbook(io.BytesIO(content)).active
        return [list(row) for row in sheet.iter_rows(values_only=True)]

    def test_export_users(self):
        buffer, filename = export_users(User.objects.all())

        rows = self.read_workbook(buffer.getvalue())
        self.assertEqual(rows[0], [header for header, _ in USER_EXPORT_COLUMNS])
        self.assertEqual(rows[1][1], "admin")
        self.assertEqual(rows[1][7], "개발팀")
        self.assertTrue(filename.startswith("사용자_"))
        self.assertTrue(filename.endswith(".xlsx"))

    def test_export_api(self):
        User.objects.create_user(username="user1", password="testpass123", status="1")

        response = self.client.get(f"{BASE_URL}export/", {"status": "0"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("attachment", response["Content-Disposition"])

        rows = self.read_workbook(b"".join(response.streaming_content))
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1][1], "admin")
