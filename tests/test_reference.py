from __future__ import annotations

from decimal import Decimal

import pytest

from calc import REFERENCE_JOBS, reference_jobs_frame, reference_tier


def test_reference_frame_derives_profit_and_margin():
    frame = reference_jobs_frame()

    assert len(frame) == len(REFERENCE_JOBS) == 9
    first = frame.iloc[0]
    assert first["Profit"] == Decimal("4792500")
    assert first["Tier"] == "high"

    seeds = frame[frame["Job"].str.startswith("Seeds")].iloc[0]
    assert seeds["Margin (%)"] == Decimal("665000") / Decimal("825000") * 100


def test_worst_job_is_low_tier():
    frame = reference_jobs_frame()
    odawara = frame[frame["Job"].str.contains("Odawara")].iloc[0]
    assert odawara["Margin (%)"] < 53
    assert odawara["Tier"] == "low"


@pytest.mark.parametrize("margin, tier", [("73", "high"), ("72.9", "mid"), ("53", "mid"), ("52.9", "low")])
def test_reference_tier_boundaries(margin, tier):
    assert reference_tier(Decimal(margin)) == tier
