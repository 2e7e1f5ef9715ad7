from .chat_client import ChatConfig, ChatReply, DSAChatClient
from .dsa_knowledge import ALGORITHM_FAQS, QUICK_QUESTIONS, SYSTEM_PROMPT, match_faq

__all__ = [
    "ALGORITHM_FAQS",
    "ChatConfig",
    "ChatReply",
    "DSAChatClient",
    "QUICK_QUESTIONS",
    "SYSTEM_PROMPT",
    "match_faq",
]
