# PGN/pager/serializers.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PGN/pager/serializers.py
# Назначение: DRF-сериализаторы для входных параметров и результата пагинации
# ─────────────────────────────────────────────────────────────────────────────

from rest_framework import serializers  # импорт базового сериализатора

from pager.conf import get_setting
from pager.services.page_model import MIN_PAGES_TO_SHOW, PageModel


class PageEntrySerializer(serializers.Serializer):
    """Одна позиция окна: номер (или '...'), URL и флаг текущей страницы."""
    num = serializers.SerializerMethodField()                             # int либо строка-многоточие
    url = serializers.CharField(allow_null=True, read_only=True)          # None для многоточия
    is_current = serializers.BooleanField(read_only=True)                 # текущая ли страница

    def get_num(self, obj):
        return obj.number


class PaginationQuerySerializer(serializers.Serializer):
    """Параметры запроса (?total=&per=&page=&max=&pattern=)."""
    total = serializers.IntegerField(min_value=0, default=0)             # всего элементов
    per = serializers.IntegerField(min_value=0, default=10)              # элементов на странице
    page = serializers.IntegerField(default=1)                            # текущая страница (без проверки диапазона)
    max = serializers.IntegerField(required=False)                        # ширина окна
    pattern = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)  # шаблон URL

    def validate_max(self, value):
        # то же ограничение, что и у PageModel.set_max_pages_to_show
        if value < MIN_PAGES_TO_SHOW:
            raise serializers.ValidationError(f"max_pages_to_show cannot be less than {MIN_PAGES_TO_SHOW}.")
        return value

    def build_model(self) -> PageModel:
        """Собирает PageModel из провалидированных данных."""
        data = self.validated_data
        pattern = data.get("pattern")
        model = PageModel(
            data["total"],
            data["per"],
            data["page"],
            pattern if pattern is not None else get_setting("URL_PATTERN"),
        )
        max_pages = data.get("max")
        model.set_max_pages_to_show(max_pages if max_pages is not None else get_setting("MAX_PAGES_TO_SHOW"))
        model.set_previous_label(get_setting("PREVIOUS_LABEL")).set_next_label(get_setting("NEXT_LABEL"))
        return model


class PaginationSummarySerializer(serializers.Serializer):
    """Сводка пагинации: счётчики, соседние страницы, диапазон элементов и окно."""
    total_items = serializers.IntegerField(read_only=True)
    items_per_page = serializers.IntegerField(read_only=True)
    current_page = serializers.IntegerField(read_only=True)
    num_pages = serializers.IntegerField(read_only=True)
    max_pages_to_show = serializers.IntegerField(read_only=True)
    prev_page = serializers.SerializerMethodField()
    next_page = serializers.SerializerMethodField()
    prev_url = serializers.SerializerMethodField()
    next_url = serializers.SerializerMethodField()
    first_item = serializers.SerializerMethodField()
    last_item = serializers.SerializerMethodField()
    pages = serializers.SerializerMethodField()

    def get_prev_page(self, obj: PageModel):
        return obj.prev_page()

    def get_next_page(self, obj: PageModel):
        return obj.next_page()

    def get_prev_url(self, obj: PageModel):
        return obj.prev_url()

    def get_next_url(self, obj: PageModel):
        return obj.next_url()

    def get_first_item(self, obj: PageModel):
        return obj.current_page_first_item()

    def get_last_item(self, obj: PageModel):
        return obj.current_page_last_item()

    def get_pages(self, obj: PageModel):
        return PageEntrySerializer(obj.compute_window(), many=True).data
