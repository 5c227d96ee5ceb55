from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    모든 SQLAlchemy 모델이 상속할 기본 Base 클래스

    컬럼 속성명은 영어, 실제 컬럼명은 기존 스키마(스페인어)를 그대로 사용:

    class User(Base):
        __tablename__ = "usuarios"
        name = Column("nombre", String(100), nullable=False)
        ...
    """

    pass
