from rest_framework.exceptions import ValidationError
from rest_framework import serializers
from django.db import transaction

from apps.common.utils import parse_ids
from .models import User, Role, Dept, Post

# Serializer는 데이터 변환


class RoleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Role
        fields = [
            "id",
            "role_name",
            "role_key",
            "sort",
            "status",
            "remark",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_at", "updated_at"]


class PostSerializer(serializers.ModelSerializer):
    class Meta:
        model = Post
        fields = ["id", "post_name", "post_code", "sort", "status", "remark"]


class DeptSerializer(serializers.ModelSerializer):
    parent_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = Dept
        fields = ["id", "parent_id", "dept_name", "sort", "leader", "phone", "email", "status"]


# 사용자 모델을 JSON 타입의 데이터로 변환
class SysUserSerializer(serializers.ModelSerializer):
    role_id = serializers.IntegerField(read_only=True, allow_null=True)
    dept_id = serializers.IntegerField(read_only=True, allow_null=True)
    post_id = serializers.IntegerField(read_only=True, allow_null=True)
    dept_name = serializers.CharField(source="dept.dept_name", read_only=True, allow_null=True)

    class Meta:
        model = User
        fields = [
            "id"
            , "username"
            , "nick_name"
            , "phone"
            , "email"
            , "sex"
            , "avatar"
            , "status"
            , "role_id"
            , "dept_id"
            , "post_id"
            , "dept_name"
            , "role_ids"
            , "post_ids"
            , "remark"
            , "create_by"
            , "update_by"
            , "last_login"
            , "last_login_ip"
            , "created_at"
            , "updated_at"
        ]


def validate_id_list(value):
    try:
        parse_ids(value)
    except ValueError:
        raise ValidationError("ID 목록 형식이 올바르지 않습니다. (예: 1,2,3)")
    return value


# 사용자 생성 시리얼라이저
class SysUserCreateSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=6)
    role_ids = serializers.CharField(required=False, allow_blank=True, validators=[validate_id_list])
    post_ids = serializers.CharField(required=False, allow_blank=True, validators=[validate_id_list])

    class Meta:
        model = User
        fields = [
            "username"
            , "password"
            , "nick_name"
            , "phone"
            , "email"
            , "sex"
            , "status"
            , "role"
            , "dept"
            , "post"
            , "role_ids"
            , "post_ids"
            , "remark"
        ]

    @transaction.atomic
    def create(self, validated_data):
        password = validated_data.pop("password")

        # 복수 역할/직위 미지정 시 대표 역할/직위로 채움
        if not validated_data.get("role_ids") and validated_data.get("role"):
            validated_data["role_ids"] = str(validated_data["role"].id)
        if not validated_data.get("post_ids") and validated_data.get("post"):
            validated_data["post_ids"] = str(validated_data["post"].id)

        return User.objects.create_user(password=password, **validated_data)


# 사용자 정보 수정
class SysUserUpdateSerializer(serializers.ModelSerializer):
    id = serializers.IntegerField()
    username = serializers.CharField(read_only=True)
    password = serializers.CharField(write_only=True, required=False, allow_blank=True)
    role_ids = serializers.CharField(required=False, allow_blank=True, validators=[validate_id_list])
    post_ids = serializers.CharField(required=False, allow_blank=True, validators=[validate_id_list])

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "password",
            "nick_name",
            "phone",
            "email",
            "sex",
            "status",
            "role",
            "dept",
            "post",
            "role_ids",
            "post_ids",
            "remark",
        ]

    @transaction.atomic
    def update(self, instance, validated_data):
        validated_data.pop("id", None)

        # 비밀번호는 값이 있을 때만 변경
        password = validated_data.pop("password", "")
        if password:
            instance.set_password(password)

        # user 기본 필드
        for key, value in validated_data.items():
            setattr(instance, key, value)

        instance.save()
        return instance


# 사용자 상태 변경
class SysUserStatusSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    status = serializers.ChoiceField(choices=["0", "1"])


class ChangePasswordSerializer(serializers.Serializer):
    """비밀번호 변경용 Serializer"""
    oldPassword = serializers.CharField(write_only=True, required=True)
    newPassword = serializers.CharField(write_only=True, required=True, min_length=6)

    def validate_oldPassword(self, value):
        """현재 비밀번호 검증"""
        user = self.context.get('request').user
        if not user.check_password(value):
            raise ValidationError("현재 비밀번호가 일치하지 않습니다.")
        return value

    def validate(self, data):
        if data['oldPassword'] == data['newPassword']:
            raise ValidationError({"newPassword": "현재 비밀번호와 다른 비밀번호를 입력해주세요."})
        return data

    def save(self):
        """비밀번호 변경"""
        user = self.context.get('request').user
        user.set_password(self.validated_data['newPassword'])
        user.update_by = user.username
        user.save()
        return user
