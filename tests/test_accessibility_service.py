"""
AccessibilityService 테스트
"""

from accessroute.core.exceptions import CollaboratorUnavailableException
from accessroute.data.fixture_provider import FixtureDataProvider
from accessroute.models.domain import FacilityType
from accessroute.services.accessibility_service import AccessibilityService


class TestAccessibilityService:
    def test_collect_near_gangnam(self, fixture_provider, gangnam):
        facilities = AccessibilityService(fixture_provider).collect_facilities([gangnam])

        ids = [f.id for f in facilities]
        assert "elev-001" in ids
        assert "bus-002" in ids
        assert "elev-011" not in ids

    def test_no_duplicate_ids_across_points(self, fixture_provider, gangnam, city_hall):
        service = AccessibilityService(fixture_provider)

        facilities = service.collect_facilities([gangnam, gangnam, city_hall, gangnam])

        ids = [f.id for f in facilities]
        assert len(ids) == len(set(ids))
        # 지점 순서대로 병합
        assert ids.index("elev-001") < ids.index("elev-011")

    def test_type_filter(self, fixture_provider, gangnam):
        facilities = AccessibilityService(fixture_provider).collect_facilities(
            [gangnam], types=[FacilityType.ELEVATOR]
        )

        assert facilities
        assert all(f.type == FacilityType.ELEVATOR for f in facilities)

    def test_points_without_coordinates_skipped(self, fixture_provider, gangnam):
        facilities = AccessibilityService(fixture_provider).collect_facilities(
            [None, gangnam]
        )

        assert facilities

    def test_failing_point_is_skipped(self, mocker, gangnam, city_hall):
        provider = FixtureDataProvider()
        real_lookup = provider.facilities_near

        def flaky(coordinate, radius_m, types=None):
            if coordinate == gangnam:
                raise CollaboratorUnavailableException()
            return real_lookup(coordinate, radius_m, types)

        mocker.patch.object(provider, "facilities_near", side_effect=flaky)

        facilities = AccessibilityService(provider).collect_facilities([gangnam, city_hall])

        ids = [f.id for f in facilities]
        assert "elev-011" in ids
        assert "elev-001" not in ids

    def test_remote_location_has_none(self, fixture_provider, remote_location):
        assert (
            AccessibilityService(fixture_provider).collect_facilities([remote_location])
            == []
        )
