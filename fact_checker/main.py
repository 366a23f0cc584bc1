"""Main script for running the fact checker."""

import asyncio

from .domain.models.verdict import CombinedVerdict
from .infrastructure.dependencies import get_service_container

PREVIEW_LENGTH = 100


def print_verdict(claim_text: str, verdict: CombinedVerdict) -> None:
    """Print a verdict the way the browser card shows it."""
    preview = claim_text[:PREVIEW_LENGTH] + ("..." if len(claim_text) > PREVIEW_LENGTH else "")
    print(f'\nChecked: "{preview}"')
    print(f"\n{verdict.title} - {verdict.description}")
    if verdict.rating:
        print(f"{verdict.rating.value} ({verdict.confidence:.0%})")

    print(f"\nExplanation: {verdict.explanation}")

    if verdict.sources:
        print("\nSources:")
        for i, source in enumerate(verdict.sources, 1):
            print(f"{i}. {source.name} - {source.url}")


async def main():
    """Run the fact checker."""
    print("Fact Checker - claim verification with Exa and Perplexity")
    print("----------------------------------------------------------")

    container = get_service_container()
    service = container.get_fact_checking_service()
    await service.initialize()

    try:
        while True:
            # Get statement from user
            statement = input("\nEnter a statement to fact-check (or 'quit' to exit): ")
            if statement.lower() in ('quit', 'exit', 'q'):
                break

            print("\nChecking facts...")
            verdict = await service.run(statement)
            print_verdict(statement.strip(), verdict)

    finally:
        # Clean up
        await container.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
