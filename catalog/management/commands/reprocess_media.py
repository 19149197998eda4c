"""
저장된 레코드의 업로드 파일에 후처리 훅을 다시 실행하는 Management Command

사이트 브랜드(SITE_BRAND_NAME)나 리사이징 크기를 바꾼 뒤 기존 파일에 반영할 때 사용합니다.

사용법:
    python manage.py reprocess_media --type=artist
    python manage.py reprocess_media --type=song --limit=10
    python manage.py reprocess_media --type=all --dry-run
"""
import logging

from django.core.management.base import BaseCommand

from catalog.hooks import run_resolve_input
from catalog.models import Artist, Song

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = '아티스트 프로필, 곡 파일, 곡 커버에 후처리 훅(WebP 변환, ID3 태그, 파일명 변경)을 다시 실행합니다.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--type',
            type=str,
            choices=['artist', 'song', 'all'],
            default='all',
            help='처리할 리스트 (artist, song, all)'
        )
        parser.add_argument(
            '--limit',
            type=int,
            default=None,
            help='리스트별 처리할 최대 개수'
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='실제 처리 없이 대상만 출력'
        )

    def handle(self, *args, **options):
        list_type = options['type']
        limit = options['limit']
        dry_run = options['dry_run']

        if dry_run:
            self.stdout.write(self.style.WARNING('DRY-RUN 모드: 실제 처리 없이 대상만 출력합니다.'))

        total_stats = {'processed': 0, 'updated': 0, 'skipped': 0}

        if list_type in ['artist', 'all']:
            artists = Artist.objects.exclude(avatar='').order_by('pk')
            self._merge(total_stats, self.reprocess(artists, ['avatar'], limit, dry_run))

        if list_type in ['song', 'all']:
            songs = Song.objects.exclude(song_file='', cover='').order_by('pk')
            self._merge(total_stats, self.reprocess(songs, ['song_file', 'cover'], limit, dry_run))

        self.stdout.write(self.style.SUCCESS(
            f'완료: 처리 {total_stats["processed"]}개, 변경 {total_stats["updated"]}개, 스킵 {total_stats["skipped"]}개'
        ))

    @staticmethod
    def _merge(total, stats):
        for key in total:
            total[key] += stats[key]

    def reprocess(self, queryset, fields, limit, dry_run):
        """queryset의 각 레코드에 fields를 '업로드된 필드'로 넘겨 훅 실행"""
        if limit:
            queryset = queryset[:limit]

        stats = {'processed': 0, 'updated': 0, 'skipped': 0}
        for instance in queryset:
            stats['processed'] += 1
            label = f'{instance._meta.verbose_name} #{instance.pk} {instance}'

            if dry_run:
                self.stdout.write(f'  [대상] {label}')
                continue

            updated = run_resolve_input(instance, fields)
            if updated:
                stats['updated'] += 1
                self.stdout.write(self.style.SUCCESS(f'  [변경] {label}: {", ".join(updated)}'))
            else:
                stats['skipped'] += 1
                self.stdout.write(self.style.WARNING(f'  [스킵] {label}'))

        return stats
