import argparse
import sys

from model_router.core.bootstrap import build_router
from model_router.core.errors import AllModelsFailedError
from model_router.core.schema import ModelRequest, Task
from model_router.logging import ConsoleLogger, LoggerRegistry, LogLevel


def show_all_models(router):
    for model in router.catalog.list():
        platform = router.platforms.find(model.platform_id)
        available = "Yes" if platform and platform.has_credentials() else "No"
        entry = router.pricing.lookup(model.id)
        if entry:
            pricing = f"${entry.input_per_million:.3f}/${entry.output_per_million:.3f}"
        else:
            pricing = "default"
        print(f"Model: {model.id:36s} Provider: {model.platform_id:11s} Tier: {model.quality_tier:7s} "
              f"Per 1M in/out: {pricing:18s} Key set: {available}")


def route_prompt(router, args) -> int:
    request = ModelRequest(
        prompt=args.prompt,
        model=args.model,
        task=Task(args.task) if args.task else None,
        temperature=args.temperature,
        max_tokens=args.max_tokens,
    )

    print(f"Estimated cost (upper bound): {router.estimate_cost(request)}")

    try:
        if args.stream:
            for chunk in router.stream(request):
                print(chunk, end="", flush=True)
            print()
            return 0

        response = router.route(request)
    except AllModelsFailedError as e:
        print("All models failed:", file=sys.stderr)
        for failure in e.failures:
            print(f"  - {failure}", file=sys.stderr)
        return 1

    if response.reasoning:
        print("Reasoning:")
        print(response.reasoning)
        print()
    print(response.content)
    print()
    print(f"Model: {response.model} ({response.provider})")
    print(f"Tokens: {response.tokens.input} in / {response.tokens.output} out / {response.tokens.total} total")
    print(f"Cost: {response.cost}")
    print(f"Latency: {response.latency_ms} ms")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="model-router", description="Route prompts across LLM providers")
    parser.add_argument("--config", help="Path to a router_config.json")
    parser.add_argument("--log-level", default="warning", help="error, warning, info, trace or debug")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every routing attempt (same as --log-level debug)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("models", help="List known models with pricing and key availability")

    route = subparsers.add_parser("route", help="Route a prompt to the best available model")
    route.add_argument("prompt")
    route.add_argument("--model", help="Explicit model id, optionally provider-prefixed")
    route.add_argument("--task", choices=[task.value for task in Task])
    route.add_argument("--temperature", type=float)
    route.add_argument("--max-tokens", type=int, dest="max_tokens")
    route.add_argument("--stream", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = LogLevel.DEBUG if args.verbose else LogLevel.parse(args.log_level)
    LoggerRegistry.set(ConsoleLogger(level=level))

    router = build_router(config_path=args.config)

    if args.command == "models":
        show_all_models(router)
        return 0
    return route_prompt(router, args)


if __name__ == "__main__":
    sys.exit(main())
