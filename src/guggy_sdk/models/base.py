from pydantic import BaseModel, ConfigDict


class GuggyModel(BaseModel):
    """Base for all SDK models; wire names are declared as field aliases."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
