"""Dataclass-based models for the project profitability calculator."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields, replace
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Literal, Mapping, Tuple

logger = logging.getLogger(__name__)

MarginRating = Literal["great", "good", "ok", "bad"]
COST_BUCKETS: Tuple[str, ...] = ("crew", "travel", "equipment", "outsourcing", "other")

ZERO = Decimal("0")
TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
FALSE_WORDS = frozenset({"false", "0", "no", "off", ""})


def coerce_amount(value: Any) -> Decimal:
    """Convert user input to a Decimal, falling back to ``0``.

    Blank, non-numeric and non-finite inputs all become ``Decimal("0")``,
    as do magnitudes a float cannot represent (``1e999999`` overflows,
    ``1e-999999`` underflows).
    """

    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, Decimal):
        amount = value
    elif value is None:
        return ZERO
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return ZERO
        try:
            amount = Decimal(text)
        except (InvalidOperation, ValueError):
            logger.debug("Coercing non-numeric input %r to 0", value)
            return ZERO
    if not amount.is_finite():
        logger.debug("Coercing non-finite input %r to 0", value)
        return ZERO
    as_float = float(amount)
    if math.isinf(as_float) or (as_float == 0 and amount != 0):
        logger.debug("Coercing out-of-range input %r to 0", value)
        return ZERO
    return amount


def coerce_flag(value: Any) -> bool:
    """Read a toggle from a bool, a number or text such as ``"false"``."""

    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    text = str(value).strip().lower()
    if text in TRUE_WORDS:
        return True
    if text in FALSE_WORDS:
        return False
    raise ValueError(f"Cannot read {value!r} as true/false.")


def _as_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValueError("Enter a number.") from exc


def _convert_for_dump(value: Any, *, json_mode: bool) -> Any:
    if isinstance(value, ModelMixin):
        return value.model_dump(mode="json" if json_mode else None)
    if isinstance(value, Decimal):
        return float(value) if json_mode else Decimal(value)
    if isinstance(value, (list, tuple)):
        return [_convert_for_dump(item, json_mode=json_mode) for item in value]
    if isinstance(value, Mapping):
        return {key: _convert_for_dump(val, json_mode=json_mode) for key, val in value.items()}
    return value


class ValidationError(Exception):
    """Raised when a payload cannot be parsed into a model."""

    def __init__(self, errors: List[Dict[str, Any]]) -> None:
        super().__init__("Validation failed")
        self._errors = errors

    def errors(self) -> List[Dict[str, Any]]:
        return self._errors


class ModelMixin:
    """Provide ``model_dump`` for dataclass models."""

    def model_dump(self, mode: str | None = None) -> Dict[str, Any]:
        json_mode = mode == "json"
        return {
            item.name: _convert_for_dump(getattr(self, item.name), json_mode=json_mode)
            for item in fields(self)  # type: ignore[arg-type]
        }


def _parse_amount(
    raw: Mapping[str, Any], key: str, loc: Tuple[Any, ...], errors: List[Dict[str, Any]]
) -> Decimal:
    value = raw.get(key, 0)
    try:
        amount = _as_decimal(value if value is not None else 0)
    except ValueError:
        errors.append({"loc": loc + (key,), "msg": "Enter a number."})
        return ZERO
    if not amount.is_finite():
        errors.append({"loc": loc + (key,), "msg": "Enter a finite number."})
        return ZERO
    return amount


@dataclass(frozen=True)
class DirectCosts(ModelMixin):
    """Out-of-pocket costs split into five independent buckets."""

    crew: Decimal = ZERO
    travel: Decimal = ZERO
    equipment: Decimal = ZERO
    outsourcing: Decimal = ZERO
    other: Decimal = ZERO

    def __post_init__(self) -> None:
        for bucket in COST_BUCKETS:
            object.__setattr__(self, bucket, coerce_amount(getattr(self, bucket)))

    def total(self) -> Decimal:
        return sum((getattr(self, bucket) for bucket in COST_BUCKETS), start=ZERO)

    def items(self) -> List[Tuple[str, Decimal]]:
        return [(bucket, getattr(self, bucket)) for bucket in COST_BUCKETS]

    def with_bucket(self, bucket: str, value: Any) -> "DirectCosts":
        if bucket not in COST_BUCKETS:
            raise KeyError(f"Unknown cost bucket: {bucket}")
        return replace(self, **{bucket: coerce_amount(value)})

    @classmethod
    def from_dict(cls, data: Any) -> "DirectCosts":
        if isinstance(data, DirectCosts):
            return data
        if not isinstance(data, Mapping):
            raise ValidationError([
                {"loc": tuple(), "msg": "Direct costs must be a mapping."}
            ])
        errors: List[Dict[str, Any]] = []
        values = {bucket: _parse_amount(data, bucket, tuple(), errors) for bucket in COST_BUCKETS}
        if errors:
            raise ValidationError(errors)
        return cls(**values)


@dataclass(frozen=True)
class TeamMember:
    """A fixed roster member with a salary-derived daily rate."""

    member_id: str
    name: str
    monthly_salary: Decimal
    daily_rate: Decimal

    @classmethod
    def from_monthly_salary(
        cls, member_id: str, name: str, monthly_salary: Any, working_days_per_month: Any
    ) -> "TeamMember":
        monthly = _as_decimal(monthly_salary)
        divisor = _as_decimal(working_days_per_month)
        if divisor <= 0:
            raise ValueError("working_days_per_month must be positive.")
        return cls(
            member_id=str(member_id),
            name=str(name),
            monthly_salary=monthly,
            daily_rate=monthly / divisor,
        )


class TeamRoster:
    """Ordered collection of team members keyed by member id."""

    def __init__(self, members: List[TeamMember] | Tuple[TeamMember, ...]) -> None:
        self._members: Dict[str, TeamMember] = {}
        for member in members:
            if member.member_id in self._members:
                raise ValueError(f"Duplicate team member id: {member.member_id}")
            self._members[member.member_id] = member

    def __iter__(self) -> Iterator[TeamMember]:
        return iter(self._members.values())

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member_id: object) -> bool:
        return member_id in self._members

    def get(self, member_id: str) -> TeamMember | None:
        return self._members.get(member_id)

    def member_ids(self) -> List[str]:
        return list(self._members.keys())

    def daily_rate(self, member_id: str) -> Decimal:
        member = self._members.get(member_id)
        if member is None:
            raise KeyError(f"Unknown team member: {member_id}")
        return member.daily_rate


@dataclass(frozen=True)
class MarginBenchmarks:
    """Benchmark gross-margin percentages used for rating a quote."""

    great: Decimal
    good: Decimal
    low: Decimal
    average: Decimal

    def __post_init__(self) -> None:
        for item in fields(self):
            object.__setattr__(self, item.name, _as_decimal(getattr(self, item.name)))
        if not self.great >= self.good >= self.low:
            raise ValueError("Benchmarks must satisfy great >= good >= low.")


@dataclass(frozen=True)
class CalculatorSettings:
    """Process-wide constants the calculator depends on."""

    exchange_rate: Decimal
    monthly_overhead: Decimal
    working_days_per_month: Decimal
    benchmarks: MarginBenchmarks
    roster: TeamRoster

    def __post_init__(self) -> None:
        object.__setattr__(self, "exchange_rate", _as_decimal(self.exchange_rate))
        object.__setattr__(self, "monthly_overhead", _as_decimal(self.monthly_overhead))
        object.__setattr__(self, "working_days_per_month", _as_decimal(self.working_days_per_month))
        if self.exchange_rate <= 0:
            raise ValueError("exchange_rate must be positive.")
        if self.working_days_per_month <= 0:
            raise ValueError("working_days_per_month must be positive.")

    @property
    def overhead_per_day(self) -> Decimal:
        return self.monthly_overhead / self.working_days_per_month


@dataclass(frozen=True)
class CalculatorInput(ModelMixin):
    """Immutable snapshot of everything the user has entered.

    ``team_days`` is stored as a read-only mapping so snapshots can be
    shared (``DEFAULT_INPUT``) and hashed.
    """

    quote_amount: Decimal = ZERO
    direct_costs: DirectCosts = field(default_factory=DirectCosts)
    total_days: Decimal = ZERO
    team_days: Mapping[str, Decimal] = field(default_factory=dict)
    include_overhead: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "quote_amount", coerce_amount(self.quote_amount))
        object.__setattr__(self, "total_days", coerce_amount(self.total_days))
        if not isinstance(self.direct_costs, DirectCosts):
            object.__setattr__(self, "direct_costs", DirectCosts.from_dict(self.direct_costs))
        object.__setattr__(
            self,
            "team_days",
            MappingProxyType(
                {str(key): coerce_amount(value) for key, value in dict(self.team_days).items()}
            ),
        )
        object.__setattr__(self, "include_overhead", coerce_flag(self.include_overhead))

    def __hash__(self) -> int:
        return hash(
            (
                self.quote_amount,
                self.direct_costs,
                self.total_days,
                tuple(sorted(self.team_days.items())),
                self.include_overhead,
            )
        )

    def with_field(self, name: str, value: Any) -> "CalculatorInput":
        """Return a copy with the scalar field or cost bucket *name* replaced."""

        if name == "include_overhead":
            return replace(self, include_overhead=coerce_flag(value))
        if name in ("quote_amount", "total_days"):
            return replace(self, **{name: coerce_amount(value)})
        if name in COST_BUCKETS:
            return self.with_direct_cost(name, value)
        raise KeyError(f"Unknown calculator field: {name}")

    def with_direct_cost(self, bucket: str, value: Any) -> "CalculatorInput":
        return replace(self, direct_costs=self.direct_costs.with_bucket(bucket, value))

    def with_team_days(self, member_id: str, days: Any) -> "CalculatorInput":
        updated = dict(self.team_days)
        updated[str(member_id)] = coerce_amount(days)
        return replace(self, team_days=updated)

    def days_for(self, member_id: str) -> Decimal:
        return self.team_days.get(member_id, ZERO)

    @classmethod
    def from_dict(cls, data: Any) -> "CalculatorInput":
        if isinstance(data, CalculatorInput):
            return data
        if not isinstance(data, Mapping):
            raise ValidationError([
                {"loc": tuple(), "msg": "Calculator input must be a mapping."}
            ])
        errors: List[Dict[str, Any]] = []
        quote = _parse_amount(data, "quote_amount", tuple(), errors)
        days = _parse_amount(data, "total_days", tuple(), errors)

        costs = DirectCosts()
        try:
            costs = DirectCosts.from_dict(data.get("direct_costs") or {})
        except ValidationError as exc:
            for detail in exc.errors():
                loc = ("direct_costs",) + tuple(detail.get("loc", ()))
                errors.append({"loc": loc, "msg": detail.get("msg", "Invalid value.")})

        raw_team = data.get("team_days") or {}
        team: Dict[str, Decimal] = {}
        if not isinstance(raw_team, Mapping):
            errors.append({"loc": ("team_days",), "msg": "team_days must be a mapping."})
        else:
            for member_id in raw_team:
                team[str(member_id)] = _parse_amount(raw_team, member_id, ("team_days",), errors)

        include_overhead = True
        try:
            include_overhead = coerce_flag(data.get("include_overhead", True))
        except ValueError:
            errors.append({"loc": ("include_overhead",), "msg": "Enter true or false."})

        if errors:
            raise ValidationError(errors)
        return cls(
            quote_amount=quote,
            direct_costs=costs,
            total_days=days,
            team_days=team,
            include_overhead=include_overhead,
        )


@dataclass(frozen=True)
class CalculatorOutput(ModelMixin):
    """Derived profitability metrics; never stored independently of inputs."""

    total_direct_costs: Decimal
    gross_profit: Decimal
    gross_margin: Decimal
    team_time_cost: Decimal
    overhead_per_day: Decimal
    overhead_allocation: Decimal
    fully_loaded_costs: Decimal
    net_profit: Decimal
    net_margin: Decimal
    daily_revenue: Decimal
    daily_profit: Decimal
    total_team_days: Decimal
    revenue_per_team_day: Decimal
    margin_rating: MarginRating

    @property
    def is_profitable(self) -> bool:
        return self.gross_profit > 0

    @property
    def is_net_profitable(self) -> bool:
        return self.net_profit > 0


PROJECT_TYPES: Dict[str, str] = {
    "brand-video": "Brand Video",
    "event-coverage": "Event / Conference",
    "promotional": "Promotional Video",
    "social-content": "Social Content Package",
    "photo-video": "Photo + Video Bundle",
    "other": "Other",
}
DEFAULT_PROJECT_TYPE = "brand-video"


@dataclass(frozen=True)
class ProjectDetails(ModelMixin):
    """Descriptive fields for the job being quoted."""

    client_name: str = ""
    project_name: str = ""
    project_type: str = DEFAULT_PROJECT_TYPE

    def __post_init__(self) -> None:
        object.__setattr__(self, "client_name", str(self.client_name or ""))
        object.__setattr__(self, "project_name", str(self.project_name or ""))
        if self.project_type not in PROJECT_TYPES:
            object.__setattr__(self, "project_type", DEFAULT_PROJECT_TYPE)

    @property
    def project_type_label(self) -> str:
        return PROJECT_TYPES[self.project_type]
