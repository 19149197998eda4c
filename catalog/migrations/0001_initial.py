import catalog.managers
import catalog.models
import catalog.utils.files
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='생성 시각')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='수정 시각')),
                ('name', models.CharField(max_length=150, verbose_name='이름')),
                ('email', models.EmailField(max_length=254, unique=True, verbose_name='이메일')),
                ('is_staff', models.BooleanField(default=False, verbose_name='관리자 화면 접근')),
                ('is_active', models.BooleanField(default=True, verbose_name='활성 여부')),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'verbose_name': '사용자',
                'verbose_name_plural': '사용자',
                'db_table': 'users',
                'ordering': ['name'],
            },
            managers=[
                ('objects', catalog.managers.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name='Artist',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='생성 시각')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='수정 시각')),
                ('name', models.CharField(max_length=200, unique=True, verbose_name='이름')),
                ('about', models.JSONField(blank=True, default=list, verbose_name='소개')),
                ('birthname', models.CharField(blank=True, default='', max_length=200, verbose_name='본명')),
                ('genre', models.CharField(blank=True, default='', max_length=100, verbose_name='장르')),
                ('dob', models.CharField(blank=True, default='', max_length=50, verbose_name='생년월일')),
                ('record_label', models.CharField(blank=True, default='', max_length=200, verbose_name='레이블')),
                ('avatar', models.ImageField(blank=True, height_field='avatar_height', upload_to='images/profiles/', validators=[catalog.utils.files.validate_upload_size], verbose_name='프로필 이미지', width_field='avatar_width')),
                ('avatar_width', models.PositiveIntegerField(blank=True, null=True)),
                ('avatar_height', models.PositiveIntegerField(blank=True, null=True)),
                ('avatar_filesize', models.PositiveIntegerField(blank=True, null=True)),
            ],
            options={
                'verbose_name': '아티스트',
                'verbose_name_plural': '아티스트',
                'db_table': 'artists',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Album',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='생성 시각')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='수정 시각')),
                ('title', models.CharField(max_length=255, unique=True, verbose_name='제목')),
                ('about', models.TextField(blank=True, default='', verbose_name='소개')),
                ('featuring', models.JSONField(blank=True, default=catalog.models.default_album_featuring, verbose_name='피처링')),
                ('artists', models.ManyToManyField(blank=True, related_name='albums', to='catalog.artist', verbose_name='아티스트')),
            ],
            options={
                'verbose_name': '앨범',
                'verbose_name_plural': '앨범',
                'db_table': 'albums',
                'ordering': ['title'],
            },
        ),
        migrations.CreateModel(
            name='Song',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='생성 시각')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='수정 시각')),
                ('title', models.CharField(max_length=255, unique=True, verbose_name='제목')),
                ('description', models.TextField(blank=True, default='', verbose_name='설명')),
                ('genre', models.CharField(blank=True, default='', max_length=100, verbose_name='장르')),
                ('listened_count', models.PositiveIntegerField(default=0, verbose_name='재생 수')),
                ('downloads', models.PositiveIntegerField(default=0, verbose_name='다운로드 수')),
                ('tags', models.CharField(blank=True, default='', max_length=500, verbose_name='태그')),
                ('song_file', models.FileField(blank=True, max_length=255, upload_to='files/', validators=[django.core.validators.FileExtensionValidator(['mp3']), catalog.utils.files.validate_upload_size], verbose_name='곡 파일')),
                ('song_filesize', models.PositiveIntegerField(blank=True, null=True)),
                ('cover', models.ImageField(blank=True, height_field='cover_height', upload_to='images/', validators=[catalog.utils.files.validate_upload_size], verbose_name='커버 이미지', width_field='cover_width')),
                ('cover_width', models.PositiveIntegerField(blank=True, null=True)),
                ('cover_height', models.PositiveIntegerField(blank=True, null=True)),
                ('cover_filesize', models.PositiveIntegerField(blank=True, null=True)),
                ('featuring', models.JSONField(blank=True, default=catalog.models.default_song_featuring, verbose_name='피처링')),
                ('lyrics', models.JSONField(blank=True, default=list, verbose_name='가사')),
                ('albums', models.ManyToManyField(blank=True, related_name='songs', to='catalog.album', verbose_name='앨범')),
                ('artists', models.ManyToManyField(blank=True, related_name='songs', to='catalog.artist', verbose_name='아티스트')),
            ],
            options={
                'verbose_name': '곡',
                'verbose_name_plural': '곡',
                'db_table': 'songs',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Comment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='생성 시각')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='수정 시각')),
                ('name', models.CharField(max_length=150, verbose_name='이름')),
                ('email', models.EmailField(max_length=254, unique=True, verbose_name='이메일')),
                ('content', models.TextField(blank=True, default='', verbose_name='내용')),
                ('songs', models.ManyToManyField(blank=True, related_name='comments', to='catalog.song', verbose_name='곡')),
            ],
            options={
                'verbose_name': '댓글',
                'verbose_name_plural': '댓글',
                'db_table': 'comments',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Reply',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='생성 시각')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='수정 시각')),
                ('name', models.CharField(max_length=150, verbose_name='이름')),
                ('content', models.TextField(blank=True, default='', verbose_name='내용')),
                ('comments', models.ManyToManyField(blank=True, related_name='replies', to='catalog.comment', verbose_name='댓글')),
            ],
            options={
                'verbose_name': '답글',
                'verbose_name_plural': '답글',
                'db_table': 'replies',
                'ordering': ['created_at'],
            },
        ),
    ]
