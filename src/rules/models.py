from pydantic import BaseModel, Field, model_validator


class GradeBand(BaseModel):
    letter: str
    min: float
    max: float


DEFAULT_BANDS = [
    GradeBand(letter="A", min=90, max=100),
    GradeBand(letter="B", min=80, max=90),
    GradeBand(letter="C", min=70, max=80),
    GradeBand(letter="D", min=60, max=70),
]

DEFAULT_ADVICE = {
    "A": "Excellent work! Keep it up.",
    "B": "Good job. A little more effort gets you to the top.",
    "C": "Fair. Review the material you missed.",
    "D": "Needs improvement. Ask for help with the hard topics.",
    "F": "Needs help! Talk to your teacher about a study plan.",
}


class GradingRules(BaseModel):
    min_score: int = 0
    max_score: int = 100
    display_places: int = Field(default=1, ge=0)
    fallback_letter: str = "F"
    bands: list[GradeBand] = Field(default_factory=lambda: list(DEFAULT_BANDS))
    advice: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ADVICE))

    @model_validator(mode="after")
    def check_bands(self) -> "GradingRules":
        if self.min_score > self.max_score:
            raise ValueError("min_score must not exceed max_score")
        # Highest band first; it is the only one closed at the top.
        ordered = sorted(self.bands, key=lambda b: b.min, reverse=True)
        for band in ordered:
            if band.min >= band.max:
                raise ValueError(f"band {band.letter} is empty: [{band.min}, {band.max})")
        for upper, lower in zip(ordered, ordered[1:]):
            if lower.max > upper.min:
                raise ValueError(f"bands {lower.letter} and {upper.letter} overlap")
        self.bands = ordered
        return self


class ProfileRules(BaseModel):
    min_age: int = 13
    email_required_char: str = Field(default="@", min_length=1)
    default_city: str = "Unknown"
    default_display_name: str = "Guest"


class ControlFlowRules(BaseModel):
    adult_age: int = 18
    grid_limit: int = Field(default=5, gt=0)


class Rules(BaseModel):
    grading: GradingRules = Field(default_factory=GradingRules)
    profiles: ProfileRules = Field(default_factory=ProfileRules)
    control_flow: ControlFlowRules = Field(default_factory=ControlFlowRules)
