"""SQL implementation of Article repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import Article
from ballot.domain.repository import ArticleRepository
from ballot.domain.value import ArticleId
from ballot.persistence.mappers import article_to_dict, row_to_article
from ballot.persistence.tables import articles_table


class SqlArticleRepository(ArticleRepository):
    """SQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_article(dict(row)) if row else None

    async def save(self, article: Article) -> Article:
        """Insert an article."""
        stmt = insert(articles_table).values(**article_to_dict(article))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return article.model_copy(
            update={"id": ArticleId(result.inserted_primary_key[0])}
        )
