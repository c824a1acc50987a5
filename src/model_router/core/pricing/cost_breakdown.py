from dataclasses import dataclass


@dataclass(frozen=True)
class CostBreakdown:
    input: float = 0.0           # USD
    output: float = 0.0          # USD

    @property
    def total(self) -> float:
        return self.input + self.output

    def to_dict(self) -> dict:
        return {"input": self.input, "output": self.output, "total": self.total}

    def __str__(self) -> str:
        return f"${self.total:.6f}"
