#!/usr/bin/env python3
"""
Scraping benchmark for htmlfunc against tree-building HTML parsers.

Every parser runs the same listing-page workload: find each ".flw-item"
card, then read the data-id of ".film-poster-ahref", the text of
".film-name" and the src of ".film-poster-img" inside it.

Input is either a directory of .html / .html.zst files (--pages-dir) or
synthetic listing pages (default).
"""

# ruff: noqa: PERF203, PLC0415, BLE001, S110
from __future__ import annotations

import argparse
import multiprocessing
import os
import pathlib
import random
import re
import sys
import threading
import time

try:
    import psutil

    _PSUTIL_AVAILABLE = True
except Exception:
    psutil = None
    _PSUTIL_AVAILABLE = False

try:
    import htmlfunc
except ImportError:
    htmlfunc = None


CARD_CLASS = "flw-item"


class MemoryMonitor:
    def __init__(self, pid: int | None = None, sample_interval: float = 0.01):
        """
        pid: process ID to monitor (default: current process).
        sample_interval: seconds between samples (default 10ms).
        """
        self.sample_interval = sample_interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        target_pid = pid if pid is not None else os.getpid()
        self._proc = psutil.Process(target_pid) if _PSUTIL_AVAILABLE else None
        self.start_rss = None
        self.end_rss = None
        self.peak_rss = None
        self.last_rss = None
        self.samples = 0

    def _get_rss(self) -> int | None:
        if not self._proc:
            return None
        try:
            return self._proc.memory_info().rss
        except Exception:
            return None

    def start(self):
        if not _PSUTIL_AVAILABLE:
            return
        self.start_rss = self._get_rss()
        self.peak_rss = self.start_rss
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self):
        while not self._stop.is_set():
            rss = self._get_rss()
            if rss is not None:
                self.last_rss = rss
                if self.peak_rss is None or rss > self.peak_rss:
                    self.peak_rss = rss
                self.samples += 1
            self._stop.wait(self.sample_interval)

    def stop(self):
        if not _PSUTIL_AVAILABLE:
            return
        self._stop.set()
        if self._thread:
            self._thread.join(timeout=1.0)

        # The child may already be gone; fall back to the last sample
        current = self._get_rss()
        if current and current > 0:
            self.end_rss = current
        else:
            self.end_rss = self.last_rss

    def to_dict(self) -> dict:
        if not _PSUTIL_AVAILABLE:
            return {"memory_note": "psutil not installed; memory metrics skipped"}

        def mb(x):
            return (x or 0) / (1024 * 1024)

        start_mb = mb(self.start_rss)
        end_mb = mb(self.end_rss)
        peak_mb = mb(self.peak_rss)
        delta_mb = end_mb - start_mb if (self.end_rss is not None and self.start_rss is not None) else 0.0
        return {
            "rss_start_mb": start_mb,
            "rss_end_mb": end_mb,
            "rss_delta_mb": delta_mb,
            "rss_peak_mb": peak_mb,
            "mem_samples": self.samples,
        }


def synthetic_page(cards: int, seed: int = 0) -> str:
    """Build a listing page shaped like the pages the workload targets."""
    rng = random.Random(seed)
    items = []
    for i in range(cards):
        items.append(
            f'<div class="flw-item">\n'
            f'  <div class="film-poster">\n'
            f'    <img data-src="/thumb/{i}.jpg" class="film-poster-img lazyload" src="/img/{i}.jpg" alt="Title {i}">\n'
            f'    <a href="/watch/title-{i}" class="film-poster-ahref item-qtip" data-id="{1000 + i}">'
            f'<i class="fas fa-play"></i></a>\n'
            f"  </div>\n"
            f'  <div class="film-detail">\n'
            f'    <h3 class="film-name"><a href="/title-{i}" title="Title {i}">Title {i} &amp; more</a></h3>\n'
            f'    <div class="fd-infor"><span class="fdi-item">TV</span><span class="dot"></span>'
            f'<span class="fdi-item fdi-duration">{rng.randint(10, 60)}m</span></div>\n'
            f"  </div>\n"
            f'  <div class="clearfix"></div>\n'
            f"</div>"
        )
    body = "\n".join(items)
    return (
        "<!DOCTYPE html>\n<html>\n<head><title>A-Z List</title>"
        '<meta charset="utf-8"><link rel="stylesheet" href="/css/app.css"></head>\n'
        '<body>\n<div id="wrapper"><div class="film_list-wrap">\n'
        f"{body}\n"
        "</div></div>\n</body>\n</html>\n"
    )


def load_pages(pages_dir: pathlib.Path, dict_path: pathlib.Path | None, limit: int | None = None) -> list[tuple[str, str]]:
    """
    Load .html and .html.zst files from a directory.
    Returns list of (filename, html_content) tuples.
    """
    if not pages_dir.exists():
        print(f"ERROR: Pages directory not found at {pages_dir}")
        sys.exit(1)
    files = sorted(p for p in pages_dir.iterdir() if p.name.endswith((".html", ".html.zst")))
    if limit:
        files = files[:limit]
    decompressor = None
    results = []
    for file_path in files:
        if file_path.name.endswith(".html"):
            results.append((file_path.name, file_path.read_text(encoding="utf-8", errors="replace")))
            continue
        if decompressor is None:
            decompressor = _zstd_decompressor(dict_path)
        try:
            html_content = decompressor.decompress(file_path.read_bytes()).decode("utf-8", errors="replace")
            results.append((file_path.name, html_content))
        except Exception as e:
            print(f"Warning: Failed to decompress {file_path.name}: {e}")
            continue
    return results


def _zstd_decompressor(dict_path: pathlib.Path | None):
    try:
        import zstandard as zstd
    except ImportError:
        print("ERROR: zstandard is required for .html.zst input. Install with: pip install zstandard")
        sys.exit(1)
    if dict_path is None:
        return zstd.ZstdDecompressor()
    if not dict_path.exists():
        print(f"ERROR: Dictionary not found at {dict_path}")
        sys.exit(1)
    return zstd.ZstdDecompressor(dict_data=zstd.ZstdCompressionDict(dict_path.read_bytes()))


def _timed(html_files: list, iterations: int, workload) -> dict:
    """Run workload(html) over every file and collect timing statistics."""
    all_times = []
    errors = 0
    error_files = []
    card_count = 0
    if html_files:
        try:
            workload(html_files[0][1])
        except Exception:
            pass
    for _ in range(iterations):
        for filename, html in html_files:
            try:
                start = time.perf_counter()
                cards = workload(html)
                elapsed = time.perf_counter() - start
                all_times.append(elapsed)
                card_count += len(cards)
            except Exception as e:
                errors += 1
                error_files.append((filename, str(e)))
    return {
        "total_time": sum(all_times),
        "mean_time": sum(all_times) / len(all_times) if all_times else 0,
        "min_time": min(all_times) if all_times else 0,
        "max_time": max(all_times) if all_times else 0,
        "errors": errors,
        "success_count": len(all_times),
        "cards": card_count // max(iterations, 1),
        "error_files": error_files,
    }


# <img> is void, so it never resolves as an element. Read the poster's
# opening tag directly; "src" must follow whitespace so data-src is skipped.
_POSTER_IMG_RE = re.compile(r'<img(?=[\s/>])[^>]*\bclass="[^"]*\bfilm-poster-img\b[^"]*"[^>]*>', re.IGNORECASE)
_SRC_RE = re.compile(r'\ssrc="([^"]*)"', re.IGNORECASE)


def poster_src(card: str) -> str | None:
    """Return the src of the card's .film-poster-img, or None."""
    tag = _POSTER_IMG_RE.search(card)
    if tag is None:
        return None
    src = _SRC_RE.search(tag.group(0))
    return src.group(1) if src else None


def htmlfunc_cards(html: str) -> list[dict]:
    """The listing workload as htmlfunc runs it."""
    return [
        {
            "id": htmlfunc.get_attr(htmlfunc.query_selector(item, ".film-poster-ahref") or "", "data-id"),
            "title": htmlfunc.get_text(htmlfunc.query_selector(item, ".film-name") or ""),
            "img": poster_src(item),
        }
        for item in htmlfunc.get_by_class(html, CARD_CLASS)
    ]


def benchmark_htmlfunc(html_files: list, iterations: int = 1) -> dict:
    """Benchmark htmlfunc's pattern-matching extraction."""
    if htmlfunc is None:
        return {"error": "htmlfunc not importable"}
    return _timed(html_files, iterations, htmlfunc_cards)


def benchmark_lxml(html_files: list, iterations: int = 1) -> dict:
    """Benchmark lxml with XPath class lookups."""
    try:
        from lxml import html as lxml_html
    except ImportError:
        return {"error": "lxml not installed (pip install lxml)"}

    def has_class(name):
        return f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')"

    def first(nodes):
        return nodes[0] if nodes else None

    def workload(html):
        root = lxml_html.fromstring(html)
        cards = []
        for item in root.xpath(f"//*[{has_class(CARD_CLASS)}]"):
            link = first(item.xpath(f".//*[{has_class('film-poster-ahref')}]"))
            name = first(item.xpath(f".//*[{has_class('film-name')}]"))
            img = first(item.xpath(f".//*[{has_class('film-poster-img')}]"))
            cards.append(
                {
                    "id": link.get("data-id") if link is not None else None,
                    "title": name.text_content().strip() if name is not None else "",
                    "img": img.get("src") if img is not None else None,
                },
            )
        return cards

    return _timed(html_files, iterations, workload)


def benchmark_bs4(html_files: list, iterations: int = 1) -> dict:
    """Benchmark BeautifulSoup4 with CSS selectors."""
    try:
        from bs4 import BeautifulSoup
    except ImportError:
        return {"error": "beautifulsoup4 not installed (pip install beautifulsoup4)"}

    def workload(html):
        soup = BeautifulSoup(html, "html.parser")
        cards = []
        for item in soup.select(f".{CARD_CLASS}"):
            link = item.select_one(".film-poster-ahref")
            name = item.select_one(".film-name")
            img = item.select_one(".film-poster-img")
            cards.append(
                {
                    "id": link.get("data-id") if link else None,
                    "title": name.get_text().strip() if name else "",
                    "img": img.get("src") if img else None,
                },
            )
        return cards

    return _timed(html_files, iterations, workload)


def benchmark_selectolax(html_files: list, iterations: int = 1) -> dict:
    """Benchmark selectolax with CSS selectors."""
    try:
        from selectolax.parser import HTMLParser
    except ImportError:
        return {"error": "selectolax not installed (pip install selectolax)"}

    def workload(html):
        tree = HTMLParser(html)
        cards = []
        for item in tree.css(f".{CARD_CLASS}"):
            link = item.css_first(".film-poster-ahref")
            name = item.css_first(".film-name")
            img = item.css_first(".film-poster-img")
            cards.append(
                {
                    "id": link.attributes.get("data-id") if link else None,
                    "title": name.text().strip() if name else "",
                    "img": img.attributes.get("src") if img else None,
                },
            )
        return cards

    return _timed(html_files, iterations, workload)


def benchmark_html5lib(html_files: list, iterations: int = 1) -> dict:
    """Benchmark html5lib with an ElementTree walk."""
    try:
        import html5lib
    except ImportError:
        return {"error": "html5lib not installed (pip install html5lib)"}

    def has_class(node, name):
        return name in (node.get("class") or "").split()

    def first(node, name):
        return next((n for n in node.iter() if has_class(n, name)), None)

    def workload(html):
        root = html5lib.parse(html, namespaceHTMLElements=False)
        cards = []
        for item in root.iter():
            if not has_class(item, CARD_CLASS):
                continue
            link = first(item, "film-poster-ahref")
            name = first(item, "film-name")
            img = first(item, "film-poster-img")
            cards.append(
                {
                    "id": link.get("data-id") if link is not None else None,
                    "title": "".join(name.itertext()).strip() if name is not None else "",
                    "img": img.get("src") if img is not None else None,
                },
            )
        return cards

    return _timed(html_files, iterations, workload)


def benchmark_html_parser(html_files: list, iterations: int = 1) -> dict:
    """Benchmark stdlib html.parser (tokenize only, no extraction)."""
    try:
        from html.parser import HTMLParser
    except ImportError:
        return {"error": "html.parser not available (stdlib)"}

    class SimpleHTMLParser(HTMLParser):
        def __init__(self):
            super().__init__()
            self.data = []

        def handle_starttag(self, tag, attrs):
            self.data.append(("start", tag, attrs))

        def handle_endtag(self, tag):
            self.data.append(("end", tag))

        def handle_data(self, data):
            self.data.append(("data", data))

    def workload(html):
        parser = SimpleHTMLParser()
        parser.feed(html)
        return []

    return _timed(html_files, iterations, workload)


BENCHMARKS = {
    "htmlfunc": benchmark_htmlfunc,
    "lxml": benchmark_lxml,
    "bs4": benchmark_bs4,
    "selectolax": benchmark_selectolax,
    "html5lib": benchmark_html5lib,
    "html.parser": benchmark_html_parser,
}


def _benchmark_worker(bench_fn, html_files, iterations, queue):
    """Worker function to run benchmark in a separate process."""
    try:
        res = bench_fn(html_files, iterations)
        queue.put(res)
    except Exception as e:
        queue.put({"error": str(e)})


def run_benchmark_isolated(bench_fn, html_files, iterations, args):
    """Run benchmark in a separate process to isolate memory usage."""
    if args.no_mem or not _PSUTIL_AVAILABLE:
        return bench_fn(html_files, iterations)

    import gc
    gc.collect()

    queue = multiprocessing.Queue()
    p = multiprocessing.Process(
        target=_benchmark_worker,
        args=(bench_fn, html_files, iterations, queue),
    )
    p.start()

    mon = MemoryMonitor(pid=p.pid, sample_interval=max(0.0005, args.mem_sample_ms / 1000.0))
    mon.start()

    res = None
    try:
        res = queue.get()
    finally:
        mon.stop()
        p.join()

    if res and "error" not in res:
        res.update(mon.to_dict())
    return res


def print_results(results: dict, file_count: int, iterations: int = 1):
    """Pretty print benchmark results."""
    print("\n" + "=" * 100)
    if iterations > 1:
        print(f"BENCHMARK RESULTS ({file_count} HTML files x {iterations} iterations)")
    else:
        print(f"BENCHMARK RESULTS ({file_count} HTML files)")
    print("=" * 100)

    header = (
        f"\n{'Parser':<15} {'Total (s)':<10} {'Mean (ms)':<10} {'Peak (MB)':<10} "
        f"{'Delta (MB)':<10} {'Cards':<8} {'Errors':<8}"
    )
    print(header)
    print("-" * 100)

    baseline = results.get("htmlfunc", {}).get("total_time", 0)

    for parser in BENCHMARKS:
        if parser not in results:
            continue
        result = results[parser]
        if "error" in result:
            print(f"{parser:<15} {result['error']}")
            continue

        total = result["total_time"]
        mean_ms = result["mean_time"] * 1000
        peak_mb = result.get("rss_peak_mb", 0)
        delta_mb = result.get("rss_delta_mb", 0)
        mem_str = f"{peak_mb:>10.1f} {delta_mb:>10.1f}" if "rss_peak_mb" in result else f"{'n/a':>10} {'n/a':>10}"

        speedup = ""
        if parser != "htmlfunc" and baseline > 0 and total > 0:
            speedup = f" ({total / baseline:.2f}x)"

        print(f"{parser:<15} {total:<10.3f} {mean_ms:<10.3f} {mem_str} {result['cards']:<8} {result['errors']:<8}{speedup}")

    print("\n" + "=" * 100)

    for parser in BENCHMARKS:
        error_files = results.get(parser, {}).get("error_files", [])
        if error_files:
            print(f"\nErrors for {parser}:")
            for filename, error_msg in error_files:
                print(f"  {filename}: {error_msg}")
            print()


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark htmlfunc against HTML parsers on a listing-page scraping workload",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--pages-dir", type=pathlib.Path, help="Directory with .html or .html.zst files")
    parser.add_argument("--dict", type=pathlib.Path, help="zstd dictionary for .html.zst files")
    parser.add_argument(
        "--limit", type=int, default=100, help="Limit number of files to load (default: 100, use 0 for all)",
    )
    parser.add_argument(
        "--synthetic-pages", type=int, default=5, help="Synthetic pages when no --pages-dir is given (default: 5)",
    )
    parser.add_argument(
        "--cards", type=int, default=200, help="Cards per synthetic page (default: 200)",
    )
    parser.add_argument(
        "--iterations", type=int, default=5, help="Number of iterations to run for averaging (default: 5)",
    )
    parser.add_argument(
        "--parsers",
        nargs="+",
        choices=list(BENCHMARKS),
        default=list(BENCHMARKS),
        help="Parsers to benchmark (default: all)",
    )
    parser.add_argument("--no-mem", action="store_true", help="Disable memory measurement (RSS sampling)")
    parser.add_argument(
        "--mem-sample-ms", type=float, default=10.0, help="Memory sampling interval in milliseconds (default: 10ms)",
    )

    args = parser.parse_args()

    if args.pages_dir:
        print(f"Loading HTML files from {args.pages_dir}...")
        html_files = load_pages(args.pages_dir, args.dict, args.limit if args.limit > 0 else None)
    else:
        print(f"Generating {args.synthetic_pages} synthetic pages with {args.cards} cards each...")
        html_files = [
            (f"synthetic-{i + 1}.html", synthetic_page(args.cards, seed=i)) for i in range(args.synthetic_pages)
        ]
    if not html_files:
        print("ERROR: No HTML files loaded")
        sys.exit(1)
    print(f"Loaded {len(html_files)} HTML files")

    total_bytes = sum(len(html) for _, html in html_files)
    print(f"Total HTML size: {total_bytes / 1024 / 1024:.2f} MB")

    if not _PSUTIL_AVAILABLE and not args.no_mem:
        print("Note: psutil not installed; memory metrics will be skipped. Install with: pip install psutil")

    results = {}
    for parser_name in args.parsers:
        print(f"\nBenchmarking {parser_name}...", end="", flush=True)
        res = run_benchmark_isolated(BENCHMARKS[parser_name], html_files, args.iterations, args)
        results[parser_name] = res
        if "error" in res:
            print(f" SKIPPED ({res['error']})")
        else:
            print(
                f" DONE ({res['total_time']:.3f}s"
                + (f", peak RSS {res.get('rss_peak_mb', 0):.1f} MB" if "rss_peak_mb" in res else "")
                + ")",
            )

    print_results(results, len(html_files), args.iterations)


if __name__ == "__main__":
    main()
