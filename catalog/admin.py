from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .forms import UserChangeForm, UserCreationForm
from .hooks import run_resolve_input
from .models import Album, Artist, Comment, Reply, Song, User


class ResolveInputAdmin(admin.ModelAdmin):
    """
    관계 저장(save_related)까지 끝난 뒤 업로드 후처리 훅 실행

    폼에서 변경된 필드만 훅에 전달합니다.
    """

    def save_related(self, request, form, formsets, change):
        super().save_related(request, form, formsets, change)
        run_resolve_input(form.instance, form.changed_data)


# ===== 👤 USER 섹션 =====

@admin.register(User)
class UserAdmin(BaseUserAdmin):
    form = UserChangeForm
    add_form = UserCreationForm
    list_display = ('name', 'email', 'is_staff', 'is_active', 'created_at')
    list_filter = ('is_staff', 'is_superuser', 'is_active')
    search_fields = ('name', 'email')
    ordering = ('name',)
    readonly_fields = ('created_at', 'updated_at', 'last_login')
    filter_horizontal = ('groups', 'user_permissions')

    fieldsets = (
        (None, {'fields': ('name', 'email', 'password')}),
        ('권한', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('기록', {'fields': ('last_login', 'created_at', 'updated_at')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('name', 'email', 'password1', 'password2'),
        }),
    )


# ===== 🎵 MUSIC 섹션 =====

@admin.register(Artist)
class ArtistAdmin(ResolveInputAdmin):
    list_display = ('name', 'genre', 'record_label', 'get_song_count', 'avatar_size_display', 'created_at')
    search_fields = ('name', 'birthname', 'genre', 'record_label')
    list_filter = ('genre', 'created_at')
    readonly_fields = ('avatar_width', 'avatar_height', 'avatar_filesize', 'created_at', 'updated_at')
    list_per_page = 100

    def get_song_count(self, obj):
        return obj.songs.count()
    get_song_count.short_description = '곡 수'

    def avatar_size_display(self, obj):
        if obj.avatar_width and obj.avatar_height:
            return f"{obj.avatar_width}x{obj.avatar_height}"
        return '-'
    avatar_size_display.short_description = '프로필 크기'


@admin.register(Song)
class SongAdmin(ResolveInputAdmin):
    list_display = ('title', 'get_artist_names', 'get_album_titles', 'genre', 'listened_count', 'downloads', 'created_at')
    list_filter = ('genre', 'created_at')
    search_fields = ('title', 'artists__name', 'albums__title', 'genre', 'tags')
    filter_horizontal = ('artists', 'albums')
    readonly_fields = (
        'song_filesize', 'cover_width', 'cover_height', 'cover_filesize',
        'created_at', 'updated_at',
    )
    list_per_page = 100
    ordering = ('-created_at',)

    def get_queryset(self, request):
        return super().get_queryset(request).prefetch_related('artists', 'albums')

    def get_artist_names(self, obj):
        return ', '.join(a.name for a in obj.artists.all()) or '-'
    get_artist_names.short_description = '아티스트'

    def get_album_titles(self, obj):
        return ', '.join(a.title for a in obj.albums.all()) or '-'
    get_album_titles.short_description = '앨범'


@admin.register(Album)
class AlbumAdmin(admin.ModelAdmin):
    list_display = ('title', 'get_artist_names', 'created_at')
    search_fields = ('title', 'artists__name')
    filter_horizontal = ('artists',)
    list_per_page = 100

    def get_artist_names(self, obj):
        return ', '.join(a.name for a in obj.artists.all()) or '-'
    get_artist_names.short_description = '아티스트'


# ===== 💬 COMMENT 섹션 =====

@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'content_preview', 'created_at')
    search_fields = ('name', 'email', 'content')
    filter_horizontal = ('songs',)
    list_per_page = 50

    def content_preview(self, obj):
        return obj.content[:50] if obj.content else '-'
    content_preview.short_description = '내용'


@admin.register(Reply)
class ReplyAdmin(admin.ModelAdmin):
    list_display = ('name', 'content_preview', 'created_at')
    search_fields = ('name', 'content')
    filter_horizontal = ('comments',)
    list_per_page = 50

    def content_preview(self, obj):
        return obj.content[:50] if obj.content else '-'
    content_preview.short_description = '내용'
