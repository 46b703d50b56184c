"""
Case tables for data-driven tests, plus the two black-box design helpers the
tables are built with.

A case table is a JSON file under techniques/data/:

    {
        "name": "age_brackets",
        "target": "testbook.techniques.pricing.classify_age",
        "cases": [
            {"id": "first-teen-year", "input": 13, "expected": "teen"},
            {"id": "negative", "input": -1, "raises": "InvalidInputError"}
        ]
    }

A test runs one assertion body over the whole table:

    table = load_case_table("age_brackets")

    @pytest.mark.parametrize("age, expected", table.pairs(), ids=table.ids())
    def test_classify_age(age, expected):
        assert classify_age(age) == expected
"""

import json
import logging
from functools import lru_cache
from importlib import resources
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from testbook import exceptions
from testbook.exceptions.base import InvalidCaseTableError, NotFoundError, TestbookError

logger = logging.getLogger(__name__)

DATA_PACKAGE = "testbook.techniques"
DATA_DIR = "data"


class Case(BaseModel):
    """One row of a case table: an input and either its expected output or the error it raises."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    input: Any
    expected: Any = None
    raises: str | None = None

    @model_validator(mode="before")
    @classmethod
    def exactly_one_outcome(cls, data: Any) -> Any:
        # A passing case may expect null/false, so its key is checked for presence.
        # A raising case may carry `expected: null`, which is what model_dump() writes.
        if isinstance(data, dict):
            if data.get("raises") is not None:
                if data.get("expected") is not None:
                    raise ValueError("a case needs exactly one of 'expected' or 'raises'")
            elif "expected" not in data:
                raise ValueError("a case needs exactly one of 'expected' or 'raises'")
        return data

    @model_validator(mode="after")
    def known_error(self) -> "Case":
        if self.raises is not None and self.raises not in exceptions.__all__:
            raise ValueError(f"unknown error name {self.raises!r}")
        return self

    @property
    def error_class(self) -> type[TestbookError] | None:
        if self.raises is None:
            return None
        return getattr(exceptions, self.raises)


class CaseTable(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    target: str
    description: str = ""
    cases: tuple[Case, ...]

    @model_validator(mode="after")
    def unique_ids(self) -> "CaseTable":
        seen: set[str] = set()
        duplicates = []
        for case in self.cases:
            if case.id in seen:
                duplicates.append(case.id)
            seen.add(case.id)
        if duplicates:
            raise ValueError(f"duplicate case ids: {', '.join(duplicates)}")
        return self

    def passing_cases(self) -> list[Case]:
        return [c for c in self.cases if c.raises is None]

    def failing_cases(self) -> list[Case]:
        return [c for c in self.cases if c.raises is not None]

    def pairs(self) -> list[tuple[Any, Any]]:
        """(input, expected) for every case that does not raise, in file order."""
        return [(c.input, c.expected) for c in self.passing_cases()]

    def ids(self) -> list[str]:
        return [c.id for c in self.passing_cases()]

    def error_pairs(self) -> list[tuple[Any, type[TestbookError]]]:
        """(input, exception class) for every case that raises, in file order."""
        return [(c.input, c.error_class) for c in self.failing_cases()]

    def error_ids(self) -> list[str]:
        return [c.id for c in self.failing_cases()]


def available_tables() -> list[str]:
    data_dir = resources.files(DATA_PACKAGE).joinpath(DATA_DIR)
    return sorted(
        entry.name.removesuffix(".json")
        for entry in data_dir.iterdir()
        if entry.name.endswith(".json")
    )


@lru_cache()
def load_case_table(name: str) -> CaseTable:
    """
    Load and validate the shipped case table `name`.

    Raises:
        NotFoundError: no table file with that name.
        InvalidCaseTableError: the file is not valid JSON or does not match the
            table schema; chained from the original error.
    """
    path = resources.files(DATA_PACKAGE).joinpath(DATA_DIR, f"{name}.json")
    if not path.is_file():
        raise NotFoundError(f"No case table named {name!r}", fields=["name"])

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        table = CaseTable.model_validate(raw)
    except json.JSONDecodeError as e:
        raise InvalidCaseTableError(f"Case table {name!r} is not valid JSON: {e.msg}") from e
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise InvalidCaseTableError(f"Case table {name!r} does not match the schema", fields=fields) from e

    logger.debug("Loaded case table", extra={"table": name, "cases": len(table.cases)})
    return table


def boundary_values(thresholds: tuple[int, ...] | list[int], *, lower: int = 0) -> list[int]:
    """
    Boundary value analysis over integer partitions.

    For each threshold t (the first value of a new partition) return t - 1 and t,
    plus `lower` itself. Values below `lower` are dropped; the result is sorted
    and free of duplicates.

    >>> boundary_values((13, 18, 65))
    [0, 12, 13, 17, 18, 64, 65]
    """
    values = {lower}
    for t in thresholds:
        values.update(v for v in (t - 1, t) if v >= lower)
    return sorted(values)


def partition_representatives(thresholds: tuple[int, ...] | list[int], *, lower: int = 0) -> list[int]:
    """
    Equivalence partitioning: one value from inside each partition.

    Partitions are [lower, t1), [t1, t2), ..., [tn, ...). Bounded partitions are
    represented by their midpoint; the open-ended last one by tn + 10.

    >>> partition_representatives((13, 18, 65))
    [6, 15, 41, 75]
    """
    bounds = sorted({t for t in thresholds if t > lower})
    reps = []
    start = lower
    for t in bounds:
        reps.append((start + t - 1) // 2)
        start = t
    reps.append(start + 10)
    return reps


__all__ = [
    "Case",
    "CaseTable",
    "available_tables",
    "load_case_table",
    "boundary_values",
    "partition_representatives",
]
