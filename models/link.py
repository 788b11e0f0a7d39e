from sqlalchemy import CHAR, CheckConstraint, Column, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()

LINK_ID_LENGTH = 6


class Link(Base):
    __tablename__ = "urls"

    id = Column(CHAR(LINK_ID_LENGTH), primary_key=True)
    url = Column(Text, unique=True, nullable=False)

    __table_args__ = (
        CheckConstraint("length(url) > 0", name="ck_urls_url_not_empty"),
    )

    def __repr__(self) -> str:
        return f"Link(id={self.id!r}, url={self.url!r})"
