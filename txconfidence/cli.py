# txconfidence/cli.py
import argparse
import json

from . import __version__
from .config import apply_profile
from .core.models import ConfidenceSignal, Pinned, TransactionRef, ViewState, WholeWallet
from .core.tracker import ConfidenceTracker
from .core.wallet import ObservableWallet
from .utils.console import print_info, print_success, print_warn


def _show(label: str, as_json: bool = False):
    def sink(state: ViewState):
        if as_json:
            print(json.dumps({"tracker": label, **state.to_dict()}))
            return
        if not state.visible:
            print_warn(f"[{label}] hidden  balance={state.balance_text!r}")
            return
        progress = "indeterminate" if state.indeterminate else f"{state.progress:.0%}"
        print_info(f"[{label}] {state.status_text or '-'}  progress={progress}  "
                   f"balance={state.balance_text!r}  size={state.indicator_size:g}")
    return sink


def run_demo(as_json: bool = False) -> None:
    """Play a short wallet history through two trackers."""
    wallet = ObservableWallet()
    whole = ConfidenceTracker(wallet, WholeWallet(), _show("wallet", as_json))

    incoming = TransactionRef("a1" * 32, update_time=1.0, confidence=ConfidenceSignal.pending(1))
    wallet.receive(incoming, 150_000_000)
    pinned = ConfidenceTracker(wallet, Pinned(incoming), _show("pinned", as_json))

    wallet.update_confidence(incoming.hash, ConfidenceSignal.pending(4), update_time=2.0)
    for depth in range(1, 7):
        wallet.update_confidence(incoming.hash, ConfidenceSignal.building(depth), update_time=2.0 + depth)

    spent = TransactionRef("b2" * 32, update_time=10.0, confidence=ConfidenceSignal.pending(2))
    wallet.send(spent, 50_000_000)
    wallet.update_confidence(spent.hash, ConfidenceSignal.dead(), update_time=11.0)

    pinned.destroy()
    whole.destroy()
    if not as_json:
        print_success("✅ Demo finished")


def main():
    """Command line interface for txconfidence"""
    parser = argparse.ArgumentParser(description="Transaction confirmation tracker")
    parser.add_argument('--version', action='store_true', help='Show version')
    parser.add_argument('--demo', action='store_true', help='Run a scripted wallet demo')
    parser.add_argument('--json', action='store_true', help='Print demo view states as JSON lines')

    args = parser.parse_args()
    apply_profile()

    if args.version:
        print(f"txconfidence v{__version__}")
    elif args.demo:
        run_demo(as_json=args.json)
    else:
        print("txconfidence - Use 'txconfidence --help' for options")

if __name__ == "__main__":
    main()
