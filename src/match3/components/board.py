from dataclasses import dataclass

@dataclass(slots=True)
class BoardShape:
    rows: int
    cols: int
