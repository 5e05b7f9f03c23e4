import sys
from voxi.api.factory import make_client
from voxi.api.interface import InsightAPIError
from voxi.api.questions import predefined_questions, resolve_request
from voxi.config import CONFIG
from voxi.reporting.view import build_view
from voxi.utils import setup_logging

def main():
    setup_logging()

    questions = sys.argv[1:]

    if not questions:
        print('[MAIN] No question provided. Usage: python main.py "<question>" ...')
        print("[MAIN] Predefined questions:")
        for q in predefined_questions():
            print(f"  - {q}")
        return 0

    client = make_client(CONFIG)
    failed = 0

    for question in questions:
        request = resolve_request(question)
        print(f"\n=== {question} ===")
        print(f"Endpoint: /{request.endpoint}")
        try:
            payload = client.fetch(question)
        except InsightAPIError as e:
            print(f"Error: {e}")
            failed += 1
            continue

        view = build_view(payload, CONFIG.language)
        print(f"Template: {view.kind.value}")
        for card in view.stats:
            print(f"{card.label}: {card.value}" + (f" ({card.caption})" if card.caption else ""))
        if view.table is not None:
            print(view.table.to_string(index=False))
        elif view.raw:
            print(view.raw)

    return 1 if failed else 0

if __name__ == "__main__":
    sys.exit(main())
