from pydantic import BaseModel, Field

from models.country import Country


class Paginated(BaseModel):
    model_config = {"populate_by_name": True}

    total_page_count: int = Field(alias="totalPageCount")
    # None on the last page
    next: str | None = None
    items: list[Country] = []
