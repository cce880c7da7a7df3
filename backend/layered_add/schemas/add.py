from pydantic import BaseModel


class AddResponse(BaseModel):
    """Result of adding an operand to the stored value."""
    operand: int
    result: int
