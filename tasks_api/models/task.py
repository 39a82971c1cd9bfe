from sqlalchemy import BigInteger, Column, Integer, String, Text
from ..core.database import Base

# Largest value a BIGINT identity column can hold
MAX_TASK_ID = 2 ** 63 - 1


class Task(Base):
    """Task model for database"""
    __tablename__ = "tasks"

    # SQLite only auto-increments INTEGER primary keys
    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        index=True,
        autoincrement=True
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    def to_dict(self) -> dict:
        """Convert task to dictionary"""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
        }

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}')>"
