import logging
from typing import Optional

from django.core.management.base import BaseCommand, CommandError, CommandParser

from pager.conf import get_setting
from pager.errors import InvalidArgument
from pager.services.page_model import PageModel
from pager.services.renderer import build_entries, render, render_text

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Печать пагинатора (HTML или текст) по числу элементов, размеру и номеру страницы."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--total", type=int, required=True, help="Всего элементов")
        parser.add_argument("--per", type=int, default=10, help="Элементов на странице")
        parser.add_argument("--page", type=int, default=1, help="Текущая страница")
        parser.add_argument("--max", type=int, default=None, help="Ширина окна (>= 3)")
        parser.add_argument("--pattern", type=str, default=None, help="Шаблон URL с (:num)")
        parser.add_argument("--format", choices=["html", "text"], default="html")

    def handle(self, *args, **opts):
        max_pages: Optional[int] = opts.get("max")
        pattern: Optional[str] = opts.get("pattern")

        model = PageModel(opts["total"], opts["per"], opts["page"], pattern or get_setting("URL_PATTERN"))
        model.set_previous_label(get_setting("PREVIOUS_LABEL")).set_next_label(get_setting("NEXT_LABEL"))
        try:
            model.set_max_pages_to_show(max_pages if max_pages is not None else get_setting("MAX_PAGES_TO_SHOW"))
        except InvalidArgument as exc:
            raise CommandError(str(exc)) from exc

        if model.num_pages <= 1:
            self.stdout.write(self.style.WARNING("! Страница одна или данных нет — пагинация не нужна"))
            return

        if opts["format"] == "text":
            out = render_text(build_entries(model))
        else:
            out = str(render(model))

        logger.info("Rendered page %s of %s", model.current_page, model.num_pages)
        self.stdout.write(out)
