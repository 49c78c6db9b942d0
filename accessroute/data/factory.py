# 데이터 제공자 팩토리

import logging
from functools import lru_cache

from accessroute.core.config import settings
from accessroute.data.provider import DataProvider

logger = logging.getLogger(__name__)


@lru_cache()
def get_data_provider() -> DataProvider:
    """
    환경 변수에 따라 데이터 제공자 반환 (싱글톤)

    - DATA_PROVIDER=fixture: FixtureDataProvider (내장 샘플 데이터)
    - DATA_PROVIDER=live: LiveDataProvider (서울 열린데이터 API)
    """
    if settings.DATA_PROVIDER == "live":
        from accessroute.data.live_provider import LiveDataProvider

        if not settings.SEOUL_API_KEY:
            logger.warning("SEOUL_API_KEY가 설정되지 않았습니다. 외부 API 호출이 실패할 수 있습니다.")

        provider = LiveDataProvider()
        logger.info("✓ LiveDataProvider 초기화 완료")
        return provider

    if settings.DATA_PROVIDER != "fixture":
        raise ValueError(f"알 수 없는 DATA_PROVIDER: {settings.DATA_PROVIDER}")

    from accessroute.data.fixture_provider import FixtureDataProvider

    provider = FixtureDataProvider()
    logger.info("✓ FixtureDataProvider 초기화 완료")
    return provider
