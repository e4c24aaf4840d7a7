from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NewsItem(BaseModel):
    """A read-only news entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="News item identifier")
    title: str
    image: str = Field(..., description="Image URL")
    content: str


SEED_NEWS: List[NewsItem] = [
    NewsItem(
        id="1",
        title="Приключение",
        image="https://i.pravatar.cc/300?img=1",
        content="Присоединяйтесь к нам в увлекательное приключение по Зеленым горам!",
    ),
    NewsItem(
        id="2",
        title="Опыт сплава по реке",
        image="https://i.pravatar.cc/300?img=2",
        content="Приготовьтесь к захватывающему путешествию по бурным порогам реки.",
    ),
    NewsItem(
        id="3",
        title="Восхождение на вершину",
        image="https://i.pravatar.cc/300?img=3",
        content="Станьте частью команды, покоряющей самые высокие горные пики.",
    ),
    NewsItem(
        id="4",
        title="Ночь в пустыне",
        image="https://i.pravatar.cc/300?img=4",
        content="Исследуйте тайны пустыни и наслаждайтесь звездным небом вдали от городской суеты.",
    ),
]


class NewsCatalog:
    """Static list of news items. No mutation operations."""

    def __init__(self, items: Optional[Iterable[NewsItem]] = None):
        self._items = tuple(SEED_NEWS if items is None else items)

    def list(self) -> List[NewsItem]:
        return list(self._items)

    def get(self, news_id: str) -> Optional[NewsItem]:
        for item in self._items:
            if item.id == news_id:
                return item
        return None
