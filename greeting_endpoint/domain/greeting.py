from pydantic import BaseModel  # pylint: disable=no-name-in-module


class Greeting(BaseModel):
    """A greeting record, identified by its name"""
    name: str | None = None

    def __hash__(self) -> int:
        return hash(self.name)
