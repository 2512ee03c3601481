# users/serializers.py
import logging
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.tokens import RefreshToken
from .models import CustomUser

logger = logging.getLogger(__name__)


def user_payload(user):
    return {
        'id': str(user.id),
        'username': user.username,
        'email': user.email,
        'full_name': user.get_full_name(),
    }


def tokens_for(user):
    refresh = RefreshToken.for_user(user)
    refresh['username'] = user.username
    return {'refresh': str(refresh), 'access': str(refresh.access_token)}


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['username'] = user.username
        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        data['user'] = user_payload(self.user)
        return data


class RegisterSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True)

    class Meta:
        model = CustomUser
        fields = ['username', 'email', 'password']
        extra_kwargs = {'email': {'required': True, 'allow_blank': False}}

    def validate_password(self, value):
        if len(value) < 8 or not any(c.isdigit() for c in value) or not any(c.isalpha() for c in value):
            raise serializers.ValidationError("Password must be at least 8 characters and contain a letter and a digit")
        return value

    def create(self, validated_data):
        user = CustomUser.objects.create_user(**validated_data)
        logger.info(f"Registered user {user.id} ({user.username})")
        return user


class MeSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(source='get_full_name', read_only=True)

    class Meta:
        model = CustomUser
        fields = ['id', 'username', 'email', 'full_name']
