"""
Unit tests for the keyword rule engine and both rule tables
"""

import pytest

from asms_api.app.responder import (
    ASMS_CHATBOT_FALLBACK,
    ResponseGenerator,
    asms_chatbot_generator,
    rule,
    vx_service_generator,
)


class TestRuleMatching:
    """Test Rule and ResponseGenerator mechanics"""

    def test_groups_are_and_combined(self):
        r = rule(["appointment"], ["book"], reply="booking")
        assert r.matches("book an appointment")
        assert not r.matches("appointment status")
        assert not r.matches("book a table")

    def test_keywords_within_group_are_or_combined(self):
        r = rule(["price", "cost"], reply="pricing")
        assert r.matches("what is the price")
        assert r.matches("how much does it cost")
        assert not r.matches("how much")

    def test_first_match_wins(self):
        generator = ResponseGenerator(
            [rule(["a"], reply="first"), rule(["a"], reply="second")],
            fallback=lambda text: "none",
        )
        assert generator.generate("a") == "first"

    def test_matching_is_case_insensitive(self):
        generator = ResponseGenerator([rule(["hello"], reply="hi!")], fallback=lambda text: "none")
        assert generator.generate("HeLLo") == "hi!"

    def test_fallback_receives_original_text(self):
        generator = ResponseGenerator([], fallback=lambda text: f"echo:{text}")
        assert generator.generate("MiXeD Case") == "echo:MiXeD Case"


class TestVXServiceRules:
    """Test the rule table behind /api/chat"""

    def setup_method(self):
        self.generator = vx_service_generator()

    def test_booking(self):
        reply = self.generator.generate("Can I book an appointment")
        assert "book an appointment" in reply
        assert reply.startswith("I can help you book an appointment!")

    def test_booking_beats_cancel_and_service(self):
        reply = self.generator.generate("Book an appointment or cancel the service")
        assert reply.startswith("I can help you book an appointment!")

    def test_check_appointment(self):
        reply = self.generator.generate("check my appointment")
        assert "appointment status" in reply

    def test_services_list(self):
        reply = self.generator.generate("Which services do you have?")
        assert "• Brake Services" in reply

    def test_service_beats_cancel(self):
        reply = self.generator.generate("cancel my service")
        assert reply.startswith("We offer a wide range of services")

    def test_cancel(self):
        assert "cancellation process" in self.generator.generate("I want to cancel")

    def test_reschedule(self):
        assert "new preferred date" in self.generator.generate("Please reschedule")

    def test_help(self):
        assert "What would you like assistance with?" in self.generator.generate("I need help")

    def test_hours(self):
        assert "8:00 AM to 6:00 PM" in self.generator.generate("What are your hours?")

    def test_location(self):
        assert "123 Service Street" in self.generator.generate("What is your address?")

    def test_price(self):
        assert "pricing information" in self.generator.generate("What does it cost?")

    def test_greeting(self):
        assert self.generator.generate("Hello") == "Hello! Welcome to VX Service. How can I assist you today?"

    def test_hi_substring_matches_inside_words(self):
        """'hi' is a plain substring test, so 'this' greets too"""
        assert self.generator.generate("this").startswith("Hello!")

    def test_thanks(self):
        assert self.generator.generate("Thank you").startswith("You're welcome!")

    def test_fallback_echoes_original_text(self):
        reply = self.generator.generate("My CAR makes noise")
        assert reply.startswith("I understand you said: 'My CAR makes noise'.")

    def test_deterministic(self):
        text = "Where is the location and what does it cost?"
        assert self.generator.generate(text) == self.generator.generate(text)


class TestASMSChatbotRules:
    """Test the rule table behind /api/chatbot/chat"""

    def setup_method(self):
        self.generator = asms_chatbot_generator()

    def test_service_or_appointment(self):
        for text in ["What services?", "book an appointment", "cancel my appointment"]:
            assert self.generator.generate(text).startswith("I can help you with our services!")

    def test_price(self):
        assert "booking wizard" in self.generator.generate("price list")

    def test_hours_via_open(self):
        assert "Saturday: 9AM-4PM" in self.generator.generate("When are you open?")

    def test_location_via_where(self):
        assert "123 Main Street" in self.generator.generate("where are you")

    def test_cancel_or_reschedule(self):
        assert "'My Appointments' page" in self.generator.generate("I need to reschedule")

    def test_greeting(self):
        assert self.generator.generate("hello").startswith("Hello! How can I assist you")

    def test_thanks(self):
        assert self.generator.generate("thanks").startswith("You're welcome! Feel free")

    def test_fallback_is_fixed_text(self):
        assert self.generator.generate("My car makes noise") == ASMS_CHATBOT_FALLBACK

    @pytest.mark.parametrize("text", ["How much does it cost", "Thank you", "hello"])
    def test_tables_differ(self, text):
        assert self.generator.generate(text) != vx_service_generator().generate(text)
