import logging
import time
import statistics
import tracemalloc

from advertizer import Advertizer, setup_logging

logger = logging.getLogger(__name__)


class PerformanceBenchmark:
    def __init__(self):
        self.latencies = []
        self.operations = 0

    def _timed(self, fn, *args):
        start_time = time.perf_counter()
        result = fn(*args)
        self.latencies.append((time.perf_counter() - start_time) * 1_000_000)
        self.operations += 1
        return result

    def _report_metrics(self, test_name: str, duration: float):
        throughput = self.operations / duration
        avg_latency = statistics.mean(self.latencies)
        p50 = statistics.median(self.latencies)
        p95 = statistics.quantiles(self.latencies, n=20)[18] if len(self.latencies) >= 20 else max(self.latencies)
        p99 = statistics.quantiles(self.latencies, n=100)[98] if len(self.latencies) >= 100 else max(self.latencies)

        print(f"\n{'=' * 60}")
        print(f"  {test_name}")
        print(f"{'=' * 60}")
        print(f"  Operations:  {self.operations}")
        print(f"  Duration:    {duration:.2f}s")
        print(f"  Throughput:  {throughput:,.0f} ops/s")
        print(f"  Avg Latency: {avg_latency:.2f}us")
        print(f"  p50 Latency: {p50:.2f}us")
        print(f"  p95 Latency: {p95:.2f}us")
        print(f"  p99 Latency: {p99:.2f}us")
        print(f"{'=' * 60}")

        return {
            "throughput": throughput,
            "avg_latency": avg_latency,
            "p50": p50,
            "p95": p95,
            "p99": p99,
        }

    def _reset(self):
        self.latencies.clear()
        self.operations = 0

    def run_push_test(self, num_items: int = 100000):
        adv = Advertizer(3)

        start_time = time.time()
        for i in range(num_items):
            self._timed(adv.push, i, f"item_{i}")
        duration = time.time() - start_time

        return self._report_metrics(f"Push Test ({num_items} new ids)", duration)

    def run_advertize_test(self, num_items: int = 10000, max_advertisements: int = 5):
        self._reset()
        adv = Advertizer(max_advertisements)
        for i in range(num_items):
            adv.push(i, f"item_{i}")

        start_time = time.time()
        while True:
            _, _, found = self._timed(adv.advertize)
            if not found:
                break
        duration = time.time() - start_time

        return self._report_metrics(
            f"Advertize Test ({num_items} ids x {max_advertisements} rounds)", duration
        )

    def run_churn_test(self, num_items: int = 10000):
        """Interleave refreshes, advertisements and removals on a full advertizer."""
        self._reset()
        adv = Advertizer(4)
        for i in range(num_items):
            adv.push(i, i)

        start_time = time.time()
        for i in range(num_items):
            self._timed(adv.advertize)
            self._timed(adv.push, (i * 7) % num_items, i)
            if i % 3 == 0:
                self._timed(adv.remove, (i * 13) % num_items)
        duration = time.time() - start_time

        logger.info("Churn test finished with %s ids still held", len(adv))
        return self._report_metrics(f"Churn Test ({num_items} ids)", duration)

    def run_all_benchmarks(self):
        print("\n" + "#" * 60)
        print("  ADVERTIZER — PERFORMANCE BENCHMARK")
        print("#" * 60)

        tracemalloc.start()

        results = {}
        results["push"] = self.run_push_test()
        results["advertize"] = self.run_advertize_test()
        results["churn"] = self.run_churn_test()

        peak_memory = tracemalloc.get_traced_memory()[1]
        tracemalloc.stop()

        print(f"\n{'=' * 60}")
        print(f"  MEMORY")
        print(f"{'=' * 60}")
        print(f"  Peak Memory Usage: {peak_memory / 1024:.1f} KB ({peak_memory / (1024*1024):.2f} MB)")
        print(f"{'=' * 60}")

        print(f"\n{'#' * 60}")
        print(f"  SUMMARY")
        print(f"{'#' * 60}")
        adv = results["advertize"]
        print(f"  Throughput:  {adv['throughput']:,.0f} ops/s {'PASS' if adv['throughput'] > 100000 else 'FAIL'} (target: >100,000)")
        print(f"  p99 Latency: {adv['p99']:.2f}us {'PASS' if adv['p99'] < 50 else 'FAIL'} (target: <50us)")
        print(f"  Peak Memory: {peak_memory / 1024:.1f} KB")
        print(f"{'#' * 60}\n")

        return results


def main():
    setup_logging(logging.INFO)

    benchmark = PerformanceBenchmark()
    benchmark.run_all_benchmarks()


if __name__ == "__main__":
    main()
