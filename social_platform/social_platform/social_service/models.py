from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text, Table
from datetime import datetime
from .db import Base
from sqlalchemy.orm import relationship


# Directed follow edges; the composite key rules out duplicate edges
follows = Table(
    "follows",
    Base.metadata,
    Column("follower_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("followed_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True),
)


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    # Denormalized count of inbound follow edges
    followers_count = Column(Integer, default=0, nullable=False)

    following = relationship(
        "User",
        secondary=follows,
        primaryjoin=id == follows.c.follower_id,
        secondaryjoin=id == follows.c.followed_id,
        back_populates="followers",
    )
    followers = relationship(
        "User",
        secondary=follows,
        primaryjoin=id == follows.c.followed_id,
        secondaryjoin=id == follows.c.follower_id,
        back_populates="following",
    )

    sent_messages = relationship("Message", foreign_keys="Message.sender_id", back_populates="sender")
    received_messages = relationship("Message", foreign_keys="Message.receiver_id", back_populates="receiver")

    def to_profile(self) -> dict:
        """Public view of the user: username and follower count."""
        return {"username": self.username, "followersCount": self.followers_count}

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, followers_count={self.followers_count})>"


class Message(Base):
    __tablename__ = "messages"
    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    sender = relationship("User", foreign_keys=[sender_id], back_populates="sent_messages")
    receiver = relationship("User", foreign_keys=[receiver_id], back_populates="received_messages")

    @classmethod
    def create(cls, sender: User, receiver: User, content: str) -> "Message":
        return cls(
            sender=sender,
            receiver=receiver,
            content=content,
            created_at=datetime.utcnow(),
        )
