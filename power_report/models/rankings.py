# power_report/models/rankings.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class ArticleItem(BaseModel):
    """One article listed on the power rankings category page."""

    slug: str


class LatestArticles(BaseModel):
    items: List[ArticleItem]


class CategoryData(BaseModel):
    latest: LatestArticles


class CategoryPageProps(BaseModel):
    category: CategoryData


class CategoryProps(BaseModel):
    page_props: CategoryPageProps = Field(..., alias="pageProps")


class CategoryResponse(BaseModel):
    """__NEXT_DATA__ payload of the category page."""

    props: CategoryProps

    @property
    def slugs(self) -> List[str]:
        return [item.slug for item in self.props.page_props.category.latest.items]


class PowerRankingEntry(BaseModel):
    """A raw ranking row as published in the article; every field may be absent."""

    team_id: Optional[StrictInt] = Field(None, alias="teamId")
    team_name: Optional[str] = Field(None, alias="teamName")
    team_nickname: Optional[str] = Field(None, alias="teamNickname")
    team_display_name: Optional[str] = Field(None, alias="teamDisplayName")
    current_week_rank: Optional[StrictInt] = Field(
        None, alias="currentWeekRank", ge=0
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def preferred_team_name(self) -> Optional[str]:
        """Team name, falling back to the nickname, then the display name."""
        for name in (self.team_name, self.team_nickname, self.team_display_name):
            if name is not None:
                return name
        return None


class ArticleData(BaseModel):
    power_rankings: List[PowerRankingEntry] = Field(
        default_factory=list, alias="powerRankings"
    )


class ArticlePageProps(BaseModel):
    article: ArticleData = Field(default_factory=ArticleData)


class ArticleProps(BaseModel):
    page_props: ArticlePageProps = Field(..., alias="pageProps")


class ArticleResponse(BaseModel):
    """__NEXT_DATA__ payload of a power rankings article."""

    props: ArticleProps

    @property
    def power_rankings(self) -> List[PowerRankingEntry]:
        return self.props.page_props.article.power_rankings


class ResolvedRanking(BaseModel):
    """A ranking entry with id, name and rank all present."""

    model_config = ConfigDict(frozen=True)

    team_id: int
    team_name: str
    rank: int
