# 사용자 관리 API
# apps/accounts/views.py → 요청을 받아서 서비스/시리얼라이저 호출
import logging
import uuid

from django.core.files.storage import default_storage
from django.http import FileResponse
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import generics, status
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.pagination import PageNumPagination
from apps.common.utils import MAX_ID, parse_ids
from utils.exceptions import (
    PermissionDeniedException,
    ResourceNotFoundException,
    ValidationException,
)
from .exports import export_users
from .filters import UserFilter
from .models import User, Role, Post, Dept
from .serializers import (
    SysUserSerializer,
    SysUserCreateSerializer,
    SysUserUpdateSerializer,
    SysUserStatusSerializer,
    RoleSerializer,
    PostSerializer,
    DeptSerializer,
    ChangePasswordSerializer,
)

logger = logging.getLogger(__name__)

# 아바타 저장 경로 (default_storage 기준)
AVATAR_UPLOAD_DIR = "uploadfile"


def get_user_or_404(user_id):
    try:
        user_id = int(user_id)
        if not 0 < user_id <= MAX_ID:
            raise OverflowError(user_id)
        return User.objects.select_related("dept", "role", "post").get(pk=user_id)
    except (User.DoesNotExist, ValueError, TypeError, OverflowError):
        raise ResourceNotFoundException("사용자를 찾을 수 없습니다.")


def all_roles_and_posts():
    return {
        "roles": RoleSerializer(Role.objects.all(), many=True).data,
        "posts": PostSerializer(Post.objects.all(), many=True).data,
    }


def _safe_ids(ids_str):
    # 빈 값/잘못된 ID/범위 밖 ID 는 건너뜀
    ids = []
    for part in (ids_str or "").split(","):
        try:
            value = int(part)
        except ValueError:
            continue
        if 0 < value <= MAX_ID:
            ids.append(value)
    return ids


# 1. 사용자 목록 조회 (검색, 필터, 페이지)
@extend_schema(
    summary="사용자 목록 조회",
    tags=["사용자"],
    parameters=[
        OpenApiParameter(name="pageNum", description="페이지 번호", type=int),
        OpenApiParameter(name="pageSize", description="페이지 크기", type=int),
    ],
)
class SysUserListView(generics.ListAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = SysUserSerializer
    pagination_class = PageNumPagination

    filter_backends = [DjangoFilterBackend]
    filterset_class = UserFilter

    def get_queryset(self):
        return User.objects.select_related("dept", "role", "post").order_by("id")


# 2. 내 정보 조회
class SysUserProfileView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="로그인 사용자 정보 조회", tags=["개인 정보"])
    def get(self, request):
        user = get_user_or_404(request.user.pk)

        return Response({
            "data": SysUserSerializer(user).data,
            "postIds": [user.post_id],
            "roleIds": [user.role_id],
            "roles": RoleSerializer(Role.objects.filter(pk=user.role_id), many=True).data,
            "posts": PostSerializer(Post.objects.filter(pk=user.post_id), many=True).data,
            "dept": DeptSerializer(Dept.objects.filter(pk=user.dept_id), many=True).data,
        })


# 3. 아바타 업로드 (multipart: upload[])
class SysUserAvatarView(APIView):
    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(summary="아바타 변경", tags=["개인 정보"])
    def post(self, request):
        files = request.FILES.getlist("upload[]")
        if not files:
            raise ValidationException("업로드할 파일이 없습니다.", field="upload[]")

        for f in files:
            logger.info(f"아바타 업로드: {f.name}")

        # 첫 번째 파일만 저장
        name = default_storage.save(f"{AVATAR_UPLOAD_DIR}/{uuid.uuid4()}.jpg", files[0])

        user = request.user
        user.avatar = default_storage.url(name)
        user.update_by = user.username
        user.save(update_fields=["avatar", "update_by", "updated_at"])

        return Response({"avatar": user.avatar})


# 4. 비밀번호 변경
class ChangePasswordView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="비밀번호 변경", tags=["개인 정보"])
    def post(self, request):
        serializer = ChangePasswordSerializer(
            data=request.data,
            context={'request': request}
        )
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"detail": "비밀번호가 성공적으로 변경되었습니다."})


# 5. 사용자 생성(POST) & 수정(PUT)
class SysUserView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="사용자 생성", tags=["사용자"], request=SysUserCreateSerializer)
    def post(self, request):
        serializer = SysUserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save(create_by=request.user.username)

        logger.info(f"사용자 생성: {user.username} by {request.user.username}")
        return Response(SysUserSerializer(user).data, status=status.HTTP_201_CREATED)

    @extend_schema(summary="사용자 수정", tags=["사용자"], request=SysUserUpdateSerializer)
    def put(self, request):
        user = get_user_or_404(request.data.get("id"))

        serializer = SysUserUpdateSerializer(user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = serializer.save(update_by=request.user.username)

        return Response(SysUserSerializer(user).data)


# 6. 사용자 상태 변경
class SysUserStatusView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="사용자 상태 변경", tags=["사용자"], request=SysUserStatusSerializer)
    def put(self, request):
        serializer = SysUserStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = get_user_or_404(serializer.validated_data["id"])
        user.status = serializer.validated_data["status"]
        user.update_by = request.user.username
        user.save(update_fields=["status", "update_by", "updated_at"])

        return Response({"id": user.id, "status": user.status})


# 7. 사용자 상세 조회(GET) & 삭제(DELETE, "1,2,3")
class SysUserDetailView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="사용자 상세 조회", tags=["사용자"])
    def get(self, request, user_ids):
        user = get_user_or_404(user_ids)

        return Response({
            "data": SysUserSerializer(user).data,
            "postIds": user.post_ids,
            "roleIds": user.role_ids,
            **all_roles_and_posts(),
        })

    @extend_schema(summary="사용자 삭제", tags=["사용자"])
    def delete(self, request, user_ids):
        try:
            ids = parse_ids(user_ids)
        except ValueError:
            raise ValidationException("사용자 ID 형식이 올바르지 않습니다.", field="userId")

        if request.user.pk in ids:
            raise PermissionDeniedException("본인 계정은 삭제할 수 없습니다.")

        users = User.objects.filter(pk__in=ids)
        deleted = users.count()
        users.delete()

        logger.info(f"사용자 삭제: {ids} by {request.user.username}")
        return Response({"deleted": deleted})


# 8. 사용자 추가 화면 초기값 (전체 역할/직위)
class SysUserInitView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="사용자 추가용 역할/직위 조회", tags=["사용자"])
    def get(self, request):
        return Response(all_roles_and_posts())


# 9. 로그인 사용자의 역할/직위 목록
class UserRolePostView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="로그인 사용자 역할/직위 조회", tags=["사용자"])
    def get(self, request):
        user = request.user

        role_ids = _safe_ids(user.role_ids)
        post_ids = _safe_ids(user.post_ids)
        role_map = Role.objects.in_bulk(role_ids)
        post_map = Post.objects.in_bulk(post_ids)

        # 저장된 순서 유지, 없는 ID 는 제외
        roles = [role_map[i] for i in role_ids if i in role_map]
        posts = [post_map[i] for i in post_ids if i in post_map]

        return Response({
            "roles": RoleSerializer(roles, many=True).data,
            "posts": PostSerializer(posts, many=True).data,
        })


# 10. 사용자 목록 Excel 내보내기
class SysUserExportView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="사용자 내보내기",
        tags=["사용자"],
        parameters=[
            OpenApiParameter(name="status", type=str),
            OpenApiParameter(name="username", type=str),
            OpenApiParameter(name="phone", type=str),
        ],
    )
    def get(self, request):
        params = request.query_params
        qs = User.objects.select_related("dept", "post").order_by("id")

        # 목록 조회와 같은 조건 (부서 제외)
        user_filter = UserFilter(
            data={key: params[key] for key in ("status", "username", "phone") if params.get(key)},
            queryset=qs,
        )
        buffer, filename = export_users(user_filter.qs)

        logger.info(f"사용자 내보내기: {filename} by {request.user.username}")
        return FileResponse(
            buffer,
            as_attachment=True,
            filename=filename,
            content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
