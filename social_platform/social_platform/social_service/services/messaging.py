import logging

from sqlalchemy.orm import Session

from ..auth import Identity
from ..errors import UserNotFoundError
from ..models import Message, User
from .common import require_user_id, service_operation

logger = logging.getLogger(__name__)


class MessagingService:
    def __init__(self, db: Session):
        self.db = db

    @service_operation("Error sending message")
    def create_message(self, identity: Identity, target_id: int, content: str) -> Message:
        """Store a direct message from the caller to ``target_id``."""
        user_id = require_user_id(identity)
        sender = self.db.query(User).filter(User.id == user_id).first()
        receiver = self.db.query(User).filter(User.id == target_id).first()

        if not receiver or not sender:
            raise UserNotFoundError()

        message = Message.create(sender, receiver, content)
        self.db.add(message)
        self.db.commit()
        logger.info("Message %s sent: sender_id=%s, receiver_id=%s", message.id, sender.id, receiver.id)
        return message
