"""Interactive terminal questionnaire for the garden style agent.

This script walks you through the same adaptive questions as the web
client and prints the resulting garden concept.
"""

from dotenv import load_dotenv

from garden_agent import QUICK_REPLIES, Message, run_agent
from garden_agent.narrative import describe_concept

# Load environment variables
load_dotenv()

EXIT_COMMANDS = ("exit", "quit", "q")
RESTART_COMMANDS = ("restart", "start over")


def print_header():
    """Print a welcome header."""
    print("\n" + "="*70)
    print("🌿 FIND YOUR GARDEN STYLE")
    print("="*70)
    print("\nAn adaptive questionnaire to learn your taste, plants you love,")
    print("how you'll use the space, and the feelings you want.")
    print("\nType a number to use a quick reply, 'restart' to start over,")
    print("or 'exit' to quit.")
    print("="*70 + "\n")


def print_quick_replies():
    for i, reply in enumerate(QUICK_REPLIES, start=1):
        print(f"  [{i}] {reply}")


def print_section(title, items):
    if not items:
        return
    print(f"\n{title}")
    for item in items:
        print(f"  • {item}")


def print_summary(summary, narrative=None):
    """Render the garden concept as grouped sections."""
    print("\n" + "-"*70)
    print("🏡 GARDEN CONCEPT")
    print("-"*70)
    print(f"Styles: {', '.join(summary.styles)}")
    print(f"Mood:   {', '.join(summary.mood_words)}")
    print_section("Plant palette", summary.plant_palette)
    print_section("Features", summary.features)
    print_section("How you'll use it", summary.usage_plan)

    badges = []
    if summary.sunlight:
        badges.append(f"Sun: {summary.sunlight}")
    if summary.maintenance:
        badges.append(f"Maintenance: {summary.maintenance}")
    if summary.climate:
        badges.append(f"Climate: {summary.climate}")
    if badges:
        print("\n" + " | ".join(badges))
    if summary.notes:
        print("\n" + " · ".join(summary.notes))
    if narrative:
        print(f"\n{narrative}")
    print("-"*70 + "\n")


def resolve_answer(user_input):
    """Map a quick-reply number to its text; anything else is returned as typed."""
    if user_input.isdigit():
        index = int(user_input) - 1
        if 0 <= index < len(QUICK_REPLIES):
            return QUICK_REPLIES[index]
    return user_input


def chat():
    """Run the interactive questionnaire loop."""
    print_header()
    messages = []

    while True:
        result = run_agent(messages)

        if result.done:
            print_summary(result.summary, describe_concept(result.summary))
            user_input = input("Type 'restart' to start over or press Enter to quit: ").strip().lower()
            if user_input in RESTART_COMMANDS:
                messages = []
                continue
            print("\n👋 Happy gardening!\n")
            break

        print(f"🌱 {result.next_question}")
        print_quick_replies()
        messages.append(Message(role="assistant", content=result.next_question))

        while True:
            user_input = input("\n🧑 You: ").strip()
            if user_input:
                break

        if user_input.lower() in EXIT_COMMANDS:
            print("\n👋 Happy gardening!\n")
            break
        if user_input.lower() in RESTART_COMMANDS:
            print("\nStarting over.\n")
            messages = []
            continue

        messages.append(Message(role="user", content=resolve_answer(user_input)))
        print()


def main():
    """Main entry point."""
    try:
        chat()
    except (KeyboardInterrupt, EOFError):
        print("\n\n👋 Questionnaire interrupted. Goodbye!\n")


if __name__ == "__main__":
    main()
