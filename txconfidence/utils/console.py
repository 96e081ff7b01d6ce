import os

from colorama import Fore, Style, init
init(autoreset=True)


def is_debug_enabled() -> bool:
    return os.getenv("TXCONF_DEBUG", "0") == "1"

def print_info(msg):
    print(Fore.CYAN + str(msg) + Style.RESET_ALL)

def print_warn(msg):
    print(Fore.YELLOW + str(msg) + Style.RESET_ALL)

def print_error(msg):
    print(Fore.RED + str(msg) + Style.RESET_ALL)

def print_success(msg):
    print(Fore.GREEN + str(msg) + Style.RESET_ALL)

def print_debug(msg):
    if not is_debug_enabled():
        return
    print(Fore.MAGENTA + str(msg) + Style.RESET_ALL)
