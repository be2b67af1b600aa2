#!/usr/bin/env python3
"""
Command Line Interface for the ASMS chatbot
Logs in and chats with the service from a terminal
"""

import argparse
import sys
from typing import List, Optional

from frontend_examples.api_client.asms_client import (
    ASMSAPIClient,
    ASMSAPIError,
    HistoryEntry,
    QUICK_ACTIONS,
)


def format_history(entries: List[HistoryEntry]) -> str:
    if not entries:
        return "No chat history yet."
    lines = []
    for entry in entries:
        lines.append(f"[{entry.timestamp}] You: {entry.message}")
        lines.append(f"[{entry.timestamp}] Bot: {entry.response}")
    return "\n".join(lines)


def send(client: ASMSAPIClient, message: str, stateless: bool) -> str:
    """Send one message and return the text to display"""
    try:
        if stateless:
            reply = client.chat(message)
        else:
            reply = client.chatbot_chat(message)
    except ASMSAPIError as e:
        return f"Error: {e}"
    return f"Bot: {reply.message}"


def show_help():
    """Show help information"""
    suggestions = "\n".join(f"  {action}" for action in QUICK_ACTIONS)
    print(f"""
ASMS Chatbot CLI - Available Commands:

  help     - Show this help message
  status   - Check service health
  history  - Show your chat history
  clear    - Clear your chat history
  quit     - Exit the CLI

Try asking:
{suggestions}
""")


def interactive_mode(client: ASMSAPIClient, stateless: bool):
    """Run interactive CLI mode"""
    print("ASMS Chatbot CLI - Interactive Mode")
    print("Type 'help' for available commands, 'quit' to exit")
    print("-" * 50)

    if not client.is_healthy():
        print("Warning: Cannot connect to the service. Responses may fail.")
        print(f"Service URL: {client.api_url}")

    while True:
        try:
            user_input = input("You: ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            break

        command = user_input.lower()
        if command in ('quit', 'exit'):
            print("Goodbye!")
            break
        elif command == 'help':
            show_help()
        elif command == 'status':
            print("Service is healthy" if client.is_healthy() else "Service appears to be down")
        elif command == 'history':
            try:
                print(format_history(client.get_history()))
            except ASMSAPIError as e:
                print(f"Error: {e}")
        elif command == 'clear':
            try:
                print(client.clear_history())
            except ASMSAPIError as e:
                print(f"Error: {e}")
        elif user_input:
            print(send(client, user_input, stateless))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ASMS Chatbot Command Line Interface",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive chatbot session
  %(prog)s --username customer --password customer123

  # Single stateless query
  %(prog)s --stateless --query "What are your hours?"

  # Show and clear history
  %(prog)s --username admin --password admin123 --history --clear-history
        """
    )
    parser.add_argument('--api-url', default='http://localhost:8000',
                        help='Service URL (default: http://localhost:8000)')
    parser.add_argument('--username', '-u', help='Username to log in with')
    parser.add_argument('--password', '-p', help='Password to log in with')
    parser.add_argument('--query', '-q', help='Single message to send (non-interactive mode)')
    parser.add_argument('--stateless', action='store_true',
                        help='Use the stateless /api/chat endpoint instead of the chatbot')
    parser.add_argument('--history', action='store_true', help='Print chat history and exit')
    parser.add_argument('--clear-history', action='store_true', help='Clear chat history and exit')
    parser.add_argument('--timeout', type=int, default=30,
                        help='Request timeout in seconds (default: 30)')
    parser.add_argument('--version', action='version', version='ASMS CLI Client 1.0')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)
    client = ASMSAPIClient(api_url=args.api_url, timeout=args.timeout)

    if args.username:
        try:
            user = client.login(args.username, args.password or '')
        except ASMSAPIError as e:
            print(f"Login failed: {e}")
            return 1
        print(f"Logged in as {user.username} ({user.role})")
    elif not args.stateless:
        print("The chatbot requires --username/--password (or use --stateless)")
        return 1

    if args.history or args.clear_history:
        try:
            if args.history:
                print(format_history(client.get_history()))
            if args.clear_history:
                print(client.clear_history())
        except ASMSAPIError as e:
            print(f"Error: {e}")
            return 1
        return 0

    if args.query:
        output = send(client, args.query, args.stateless)
        print(output)
        return 1 if output.startswith("Error:") else 0

    interactive_mode(client, args.stateless)
    return 0


if __name__ == "__main__":
    sys.exit(main())
