"""
Custom Model Managers

email을 로그인 식별자로 사용하는 User 모델의 매니저입니다.
"""
from django.contrib.auth.base_user import BaseUserManager


class UserManager(BaseUserManager):
    """
    email 기반 사용자 생성 매니저

    사용 예시:
        User.objects.create_user(email='a@b.com', name='Ada', password='...')
        User.objects.create_superuser(email='admin@b.com', name='Admin', password='...')
    """
    use_in_migrations = True

    def _create_user(self, email, name, password, **extra_fields):
        if not email:
            raise ValueError('email은 필수입니다.')
        if not name:
            raise ValueError('name은 필수입니다.')
        email = self.normalize_email(email)
        user = self.model(email=email, name=name, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, name, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, name, password, **extra_fields)

    def create_superuser(self, email, name, password=None, **extra_fields):
        """관리자 화면(Admin UI)에 접근할 수 있는 슈퍼유저 생성"""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('슈퍼유저는 is_staff=True 여야 합니다.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('슈퍼유저는 is_superuser=True 여야 합니다.')

        return self._create_user(email, name, password, **extra_fields)
