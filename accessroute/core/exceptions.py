# custom exception 정의 및 관리


class AccessRouteException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# 후보 집합(그래프, 정류장 목록)에 역/정류장이 없음
class NotFoundException(AccessRouteException):
    def __init__(self, message: str = "역 또는 정류장을 찾을 수 없습니다"):
        super().__init__(message, code="NOT_FOUND")


# 두 역 모두 알려져 있지만 경로가 없음
class UnreachableException(AccessRouteException):
    def __init__(self, message: str = "경로를 찾을 수 없습니다"):
        super().__init__(message, code="ROUTE_UNREACHABLE")


# 외부 데이터 제공자 실패 또는 timeout
class CollaboratorUnavailableException(AccessRouteException):
    def __init__(self, message: str = "외부 데이터 소스를 사용할 수 없습니다"):
        super().__init__(message, code="COLLABORATOR_UNAVAILABLE")


class InvalidLocationException(AccessRouteException):
    def __init__(self, message: str = "유효하지 않은 위치입니다"):
        super().__init__(message, code="INVALID_LOCATION")
