import json
import statistics
import time

from tabulate import tabulate
from tqdm import tqdm

import config
from feldman import FeldmanVSS
from shamir import ShamirSecretSharing


class PerformanceTest:
    def __init__(self, threshold=config.Config.DEFAULT_THRESHOLD,
                 total_shares=config.Config.DEFAULT_TOTAL_SHARES):
        self.threshold = threshold
        self.total_shares = total_shares
        self.results = {
            "shamir_split": [],
            "shamir_reconstruct": [],
            "feldman_split": [],
            "feldman_verify": [],
            "feldman_reconstruct": []
        }

    @staticmethod
    def _timed(fn, *args):
        start = time.perf_counter()
        result = fn(*args)
        return result, time.perf_counter() - start

    def run_shamir_tests(self, num_runs=config.Config.PERFORMANCE_SAMPLES):
        """Test Shamir's Secret Sharing performance"""
        print("\n=== Shamir's Secret Sharing Performance ===")
        shamir = ShamirSecretSharing(self.threshold, self.total_shares)
        secret = config.Config.DEMO_SHAMIR_SECRET

        for _ in tqdm(range(num_runs)):
            shares, elapsed = self._timed(shamir.split_secret, secret)
            self.results["shamir_split"].append(elapsed)
            _, elapsed = self._timed(shamir.reconstruct_secret, shares[:self.threshold])
            self.results["shamir_reconstruct"].append(elapsed)

    def run_feldman_tests(self, num_runs=config.Config.PERFORMANCE_SAMPLES):
        """Test Feldman VSS performance with the configured 2048-bit group"""
        print("\n=== Feldman VSS Performance ===")
        vss = FeldmanVSS(*config.Config.feldman_group(), self.threshold, self.total_shares)
        secret = config.Config.DEMO_FELDMAN_SECRET

        for _ in tqdm(range(num_runs)):
            (shares, commitments), elapsed = self._timed(vss.split_secret, secret)
            self.results["feldman_split"].append(elapsed)
            _, elapsed = self._timed(vss.verify_share, shares[0], commitments)
            self.results["feldman_verify"].append(elapsed)
            _, elapsed = self._timed(vss.reconstruct_secret, shares[:self.threshold])
            self.results["feldman_reconstruct"].append(elapsed)

    def summary(self):
        rows = [
            [name, len(times), f"{statistics.mean(times)*1000:.3f}", f"{max(times)*1000:.3f}"]
            for name, times in self.results.items() if times
        ]
        return tabulate(rows, headers=["Operation", "Runs", "Mean (ms)", "Max (ms)"])

    def save_results(self, filename="performance_results.json"):
        with open(filename, "w") as f:
            json.dump(self.results, f, indent=2)
        print(f"Results saved to {filename}")


if __name__ == "__main__":
    tester = PerformanceTest()
    tester.run_shamir_tests()
    tester.run_feldman_tests()
    print()
    print(tester.summary())
    tester.save_results()
