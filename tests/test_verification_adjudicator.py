"""
Tests for the Verification Adjudicator.
"""
import pytest

from backoffice.modules.view_cache import ADMIN_VIEW, STAFF_VIEW


@pytest.mark.asyncio
async def test_approve_then_reject_overwrites(container, seed):
    await seed.profile("p-1")
    await seed.report("r-1", "p-1", status="pending")

    approved = await container.verification_adjudicator.update_verification_status("r-1", "approved")
    assert approved.success
    assert (await container.verification_repository.get_by_id("r-1"))["status"] == "approved"

    rejected = await container.verification_adjudicator.update_verification_status("r-1", "rejected")
    assert rejected.success
    assert (await container.verification_repository.get_by_id("r-1"))["status"] == "rejected"


@pytest.mark.asyncio
async def test_status_is_normalized(container, seed):
    await seed.report("r-1", "p-1")

    result = await container.verification_adjudicator.update_verification_status("r-1", " Approved ")

    assert result.success
    assert (await container.verification_repository.get_by_id("r-1"))["status"] == "approved"


@pytest.mark.asyncio
async def test_unrecognized_status_is_not_written(container, seed, signals):
    await seed.report("r-1", "p-1", status="pending")

    result = await container.verification_adjudicator.update_verification_status("r-1", "Submitted")

    assert result.success is False
    assert "ReportStatus" in result.error
    assert (await container.verification_repository.get_by_id("r-1"))["status"] == "pending"
    assert signals == []


@pytest.mark.asyncio
async def test_missing_report_fails_without_invalidation(container, signals):
    result = await container.verification_adjudicator.update_verification_status("missing", "approved")

    assert result.success is False
    assert "not found" in result.error
    assert signals == []


@pytest.mark.asyncio
async def test_success_emits_one_admin_signal(container, seed, signals):
    await seed.report("r-1", "p-1")

    await container.verification_adjudicator.update_verification_status("r-1", "rejected")

    assert [s.path for s in signals].count(ADMIN_VIEW) == 1
    assert signals[0].entity_type == "verification_report"
    assert signals[0].entity_id == "r-1"


@pytest.mark.asyncio
async def test_adjudication_is_audited(container, seed):
    await seed.report("r-1", "p-1")

    await container.verification_adjudicator.update_verification_status(
        "r-1", "approved", user_context={"user_id": "admin-7"}
    )

    [event] = await container.audit.list_events("VERIFICATION_REPORT", "r-1")
    assert event["user_id"] == "admin-7"
    assert event["details"] == {"status": "approved"}


@pytest.mark.asyncio
async def test_submit_report_creates_pending_report(container, seed, signals):
    await seed.profile("p-1")

    result = await container.verification_adjudicator.submit_report("p-1", report_text="Visited the farm")

    assert result.success
    [report] = await container.verification_repository.list_recent()
    assert report["profile_id"] == "p-1"
    assert report["status"] == "pending"
    assert report["report_text"] == "Visited the farm"
    assert STAFF_VIEW in [s.path for s in signals]


@pytest.mark.asyncio
async def test_submit_report_requires_profile(container, signals):
    result = await container.verification_adjudicator.submit_report("", report_text="Visited the farm")

    assert result.to_dict() == {"error": "Missing required fields"}
    assert signals == []


@pytest.mark.asyncio
@pytest.mark.parametrize("report_text", ["", "   ", None])
async def test_submit_report_requires_report_text(container, seed, signals, report_text):
    await seed.profile("p-1")

    result = await container.verification_adjudicator.submit_report("p-1", report_text=report_text)

    assert result.to_dict() == {"error": "Missing required fields"}
    assert await container.verification_repository.list_recent() == []
    assert signals == []


@pytest.mark.asyncio
async def test_dashboard_sees_adjudication_on_next_load(container, seed):
    await seed.report("r-1", "p-1", status="pending")

    before = await container.admin_dashboard.load()
    assert [r.status for r in before.reports] == ["pending"]

    await container.verification_adjudicator.update_verification_status("r-1", "approved")

    after = await container.admin_dashboard.load()
    assert [r.status for r in after.reports] == ["approved"]
