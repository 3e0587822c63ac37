from http.client import HTTPException


class OrganizationHttpRequestException(HTTPException): ...


class OrganizationHttpResponseException(HTTPException):
    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(status_code, detail)
        self.status_code = status_code
        self.detail = detail
