# 회원가입/로그인 요청·응답 스키마
#
# JSON 키는 기존 프론트엔드(ecomapfend)와 맞춰 스페인어 alias 사용 (nombre, creado_en ...).
# populate_by_name=True 라서 코드/클라이언트 모두 영어 필드명도 사용 가능.

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints

# 이름은 앞뒤 공백 제거 후 비어 있으면 거부. 비밀번호는 입력 그대로(공백 포함) 해시.
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class RegisterBody(BaseModel):
    """회원가입 요청. 모든 필드 필수."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: NameStr = Field(..., alias="nombre")
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)  # bcrypt 입력 한도


class LoginBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserPublic(BaseModel):
    """외부에 노출 가능한 사용자 필드 (비밀번호 해시 제외)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str = Field(..., alias="nombre")
    email: str
    created_at: Optional[datetime] = Field(default=None, alias="creado_en")


class RegisterResponse(BaseModel):
    message: str
    user: UserPublic


class LoginResponse(BaseModel):
    message: str
    token: str
    token_type: str = "bearer"
    user: UserPublic


class TokenClaims(BaseModel):
    """검증된 토큰에서 꺼낸 사용자 식별 정보 (라우터로 전달)."""

    user_id: int
    email: str
