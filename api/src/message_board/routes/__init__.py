from message_board.routes import messages

__all__ = ["messages"]
