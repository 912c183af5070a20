"""In-memory article repository for testing."""

from itertools import count
from typing import Optional

from ballot.domain.model.article import Article
from ballot.domain.repository.article import ArticleRepository
from ballot.domain.value import ArticleId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}
        self._ids = count(1)

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def save(self, article: Article) -> Article:
        """Save an article, assigning an id when it has none."""
        if article.id is None:
            article = article.model_copy(update={"id": ArticleId(next(self._ids))})
        self._articles[article.id] = article
        return article
