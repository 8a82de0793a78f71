import argparse
import json
import logging
import sys
from pathlib import Path


def _add_backend_to_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    backend_root = repo_root / "backend"
    if str(backend_root) not in sys.path:
        sys.path.insert(0, str(backend_root))


def _collect_inputs(inputs: list[str]) -> list[Path]:
    paths: list[Path] = []
    for item in inputs:
        path = Path(item)
        if path.is_dir():
            paths.extend(sorted(path.glob("*.svg")))
        else:
            paths.append(path)
    return paths


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Run border edge detection on SVG samples."
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        help="SVG文件或目录",
    )
    parser.add_argument(
        "--config",
        default="",
        help="可选：运行期配置YAML（默认：documents/cellmark_runtime.yaml）",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="以JSON输出全部边",
    )
    args = parser.parse_args()

    _add_backend_to_path()
    from cellmark.config import get_config, reload_config  # type: ignore
    from cellmark.interfaces import DocumentLoadError  # type: ignore
    from cellmark.pipeline import EditorSession  # type: ignore

    config = reload_config(args.config) if args.config else get_config()
    logging.basicConfig(level=config.logging.log_level)

    inputs = _collect_inputs(args.inputs)
    if not inputs:
        print("未找到可处理文件")
        return 1

    session = EditorSession(config)
    failed = 0
    for path in inputs:
        try:
            state = session.load_file(path)
        except DocumentLoadError as exc:
            failed += 1
            print(f"{path.name}: ERROR {exc}")
            continue

        if args.json:
            edges = [edge.model_dump(mode="json") for edge in state.edges]
            print(json.dumps({"file": path.name, "edges": edges}, ensure_ascii=False))
        else:
            print(
                f"{path.name}: extent={state.width}x{state.height} "
                f"edges={len(state.edges)}"
            )

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
