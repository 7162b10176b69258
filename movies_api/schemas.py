from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, Field, AnyHttpUrl, TypeAdapter, ValidationError, field_validator


# ------------------------------------------------------------
# Genre: 허용되는 장르 이름 (대소문자 구분)
# ------------------------------------------------------------
class Genre(str, Enum):
    ACTION = "Action"
    ADVENTURE = "Adventure"
    CRIME = "Crime"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    THRILLER = "Thriller"
    SCI_FI = "Sci-Fi"


_http_url = TypeAdapter(AnyHttpUrl)


def check_url(value: str) -> str:
    # URL 형식만 검사하고 값은 입력 그대로 유지 (AnyHttpUrl은 끝에 "/"를 붙이는 등 정규화함)
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("Poster must be a valid URL")
    return value


def check_integral_number(value):
    # 1999, 1999.0 허용 / "1999", true 거부. 소수부가 있는 값은 이후 int 검증에서 거부됨
    if value is None:
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Input should be a number")
    return value


# ------------------------------------------------------------
# MovieCreate: 영화 생성(POST) 요청 바디 — 전체 검증
# ------------------------------------------------------------
# - 스키마에 없는 필드(id 포함)는 무시됨 (pydantic 기본 extra="ignore")
# - strict=True: "1999" 같은 문자열을 숫자로 바꾸지 않음
# - year/duration은 정수값인 float(1999.0)까지 허용
class MovieCreate(BaseModel):
    title: str = Field(..., min_length=1, strict=True)
    year: int = Field(..., ge=1900, le=2100)
    director: str = Field(..., min_length=1, strict=True)
    duration: int = Field(..., gt=0)                    # 분 단위
    rate: float = Field(5.0, ge=0, le=10, strict=True)  # 없으면 5, int도 허용
    poster: str = Field(..., strict=True)
    genre: List[Genre] = Field(..., min_length=1)

    @field_validator("year", "duration", mode="before")
    @classmethod
    def numbers_only(cls, v):
        return check_integral_number(v)

    @field_validator("poster")
    @classmethod
    def poster_is_url(cls, v: str) -> str:
        return check_url(v)


# ------------------------------------------------------------
# MovieUpdate: 영화 부분 수정(PATCH) 요청 바디 — 부분 검증
# ------------------------------------------------------------
# - 모든 필드 선택. 보낸 필드만 MovieCreate와 같은 규칙으로 검증
# - 명시적인 null은 거부 (기본값 None에는 validator가 실행되지 않음)
# - 병합 시 model_dump(exclude_unset=True)로 보낸 필드만 사용
class MovieUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, strict=True)
    year: Optional[int] = Field(None, ge=1900, le=2100)
    director: Optional[str] = Field(None, min_length=1, strict=True)
    duration: Optional[int] = Field(None, gt=0)
    rate: Optional[float] = Field(None, ge=0, le=10, strict=True)
    poster: Optional[str] = Field(None, strict=True)
    genre: Optional[List[Genre]] = Field(None, min_length=1)

    @field_validator("year", "duration", mode="before")
    @classmethod
    def numbers_only(cls, v):
        return check_integral_number(v)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null")
        return v

    @field_validator("poster")
    @classmethod
    def poster_is_url(cls, v: str) -> str:
        return check_url(v)


# ------------------------------------------------------------
# MovieOut: 클라이언트로 내보낼 "영화" 응답 스키마
# ------------------------------------------------------------
class MovieOut(BaseModel):
    id: str
    title: str
    year: int
    director: str
    duration: int
    poster: str
    genre: List[str]
    rate: float

    class Config:
        # ORM 객체(SQLAlchemy Movie)로부터 필드 맵핑 허용
        from_attributes = True


class MessageOut(BaseModel):
    message: str
