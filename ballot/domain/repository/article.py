"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ballot.domain.model.article import Article
from ballot.domain.value import ArticleId


class ArticleRepository(ABC):
    """Read access to articles, plus ``save`` for the owning subsystem."""

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Insert an article and return it with its id set."""
        pass
