"""
Keyword rule engine behind both chat endpoints.

A rule table is an ordered tuple of ``Rule`` objects evaluated against the
lower-cased message; the first rule that matches supplies the reply. Each
rule holds one or more keyword groups: every group must match (AND), and a
group matches when any of its keywords is a substring of the message (OR).

The stateless ``/api/chat`` endpoint and the ``/api/chatbot`` endpoint use
different tables (``VX_SERVICE_RULES`` and ``ASMS_CHATBOT_RULES``). They
overlap but are kept apart since their ordering decides which reply wins
when several keywords appear in one message.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    groups: Tuple[Tuple[str, ...], ...]
    reply: str

    def matches(self, text: str) -> bool:
        return all(any(keyword in text for keyword in group) for group in self.groups)


def rule(*groups: Sequence[str], reply: str) -> Rule:
    """Build a rule; each positional argument is one OR-group of keywords"""
    return Rule(groups=tuple(tuple(group) for group in groups), reply=reply)


class ResponseGenerator:
    """Deterministic reply generator over an ordered rule table"""

    def __init__(self, rules: Sequence[Rule], fallback: Callable[[str], str]):
        self.rules = tuple(rules)
        self.fallback = fallback

    def generate(self, text: str) -> str:
        message = text.lower()
        for index, candidate in enumerate(self.rules):
            if candidate.matches(message):
                logger.debug(f"Matched rule {index}")
                return candidate.reply
        return self.fallback(text)


# Stateless chat (/api/chat)

VX_SERVICE_RULES = (
    rule(
        ["appointment"], ["book"],
        reply="I can help you book an appointment! What type of service do you need? "
              "We offer oil changes, brake services, tire rotations, and more.",
    ),
    rule(
        ["appointment"], ["check"],
        reply="I'll help you check your appointment status. Could you please provide "
              "your appointment ID or registration number?",
    ),
    rule(
        ["services", "service"],
        reply="We offer a wide range of services including:\n"
              "• Regular Maintenance (Oil Change, Filter Replacement)\n"
              "• Brake Services\n"
              "• Tire Services\n"
              "• Engine Diagnostics\n"
              "• AC Services\n"
              "Would you like to know more about any specific service?",
    ),
    rule(
        ["cancel"],
        reply="I understand you want to cancel an appointment. Please provide your "
              "appointment ID, and I'll help you with the cancellation process.",
    ),
    rule(
        ["reschedule"],
        reply="I can help you reschedule your appointment. Please provide your "
              "appointment ID and the new preferred date and time.",
    ),
    rule(
        ["support", "help"],
        reply="I'm here to help! You can:\n"
              "• Book a new appointment\n"
              "• Check appointment status\n"
              "• View our services\n"
              "• Reschedule or cancel appointments\n"
              "What would you like assistance with?",
    ),
    rule(
        ["hours", "timing"],
        reply="We're open Monday to Saturday, 8:00 AM to 6:00 PM. "
              "We're closed on Sundays and public holidays.",
    ),
    rule(
        ["location", "address"],
        reply="We're located at 123 Service Street, City Center. "
              "You can find us easily using Google Maps. Would you like directions?",
    ),
    rule(
        ["price", "cost"],
        reply="Our pricing varies by service. Could you let me know which specific "
              "service you're interested in? I'll provide you with accurate pricing information.",
    ),
    rule(
        ["hello", "hi"],
        reply="Hello! Welcome to VX Service. How can I assist you today?",
    ),
    rule(
        ["thank"],
        reply="You're welcome! Is there anything else I can help you with?",
    ),
)


def vx_service_fallback(text: str) -> str:
    return (
        f"I understand you said: '{text}'. "
        "I'm here to help with appointments, services, and general inquiries. "
        "Could you please provide more details about what you need?"
    )


# History-backed chatbot (/api/chatbot/chat)

ASMS_CHATBOT_RULES = (
    rule(
        ["service", "appointment"],
        reply="I can help you with our services! We offer vehicle maintenance, repairs, "
              "and inspections. Would you like to book an appointment?",
    ),
    rule(
        ["price", "cost"],
        reply="Our pricing varies based on the service. Please select a service from the "
              "booking wizard to see detailed pricing.",
    ),
    rule(
        ["hours", "open"],
        reply="We're open Monday-Friday: 8AM-6PM, Saturday: 9AM-4PM, and closed on Sundays.",
    ),
    rule(
        ["location", "where"],
        reply="We're located at 123 Main Street. You can find directions in our contact section.",
    ),
    rule(
        ["cancel", "reschedule"],
        reply="You can manage your appointments from the 'My Appointments' page. "
              "Need help with a specific appointment?",
    ),
    rule(
        ["hello", "hi"],
        reply="Hello! How can I assist you with your vehicle service needs today?",
    ),
    rule(
        ["thank"],
        reply="You're welcome! Feel free to ask if you need anything else.",
    ),
)

ASMS_CHATBOT_FALLBACK = (
    "I'm here to help! You can ask me about services, appointments, pricing, or hours. "
    "What would you like to know?"
)


def asms_chatbot_fallback(text: str) -> str:
    return ASMS_CHATBOT_FALLBACK


def vx_service_generator() -> ResponseGenerator:
    return ResponseGenerator(VX_SERVICE_RULES, vx_service_fallback)


def asms_chatbot_generator() -> ResponseGenerator:
    return ResponseGenerator(ASMS_CHATBOT_RULES, asms_chatbot_fallback)
