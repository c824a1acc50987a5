from dataclasses import dataclass


@dataclass(frozen=True)
class TokenUsage:
    input: int = 0
    output: int = 0

    @property
    def total(self) -> int:
        return self.input + self.output

    def to_dict(self) -> dict:
        return {"input": self.input, "output": self.output, "total": self.total}
