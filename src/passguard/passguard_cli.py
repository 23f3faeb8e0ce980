"""
passguard - password generation, hashing and strength checks
"""
# ==============================================================
# Standard imports
# ==============================================================
import sys
import time
import logging
import getpass

# ==============================================================
# Other imports
# ==============================================================

try:
    from passguard.config.config_passguard import *
    from passguard.config.logging_config import setup_logging, timestamp
    from passguard.utils.charset import CharsetClass
    from passguard.utils.exceptions import CharsetError, WordListError
    from passguard.utils.password_generator import GeneratorConfig, PasswordGenerator
    from passguard.utils.password_hasher import PasswordHasher
    from passguard.utils.password_utils import HashAlgorithmDifficulty, strength_report
    from passguard.utils.word_lists import WordLists, load_word_lists
    from passguard.utils.user_input import get_int, get_yes_no
    from passguard.utils.clipboard_utils import copy_to_clipboard

except ImportError as e:
    missing_package = e.name if hasattr(e, "name") else "unknown package"
    print("Missing required dependency!")
    print(f"  {missing_package} is not installed")
    logging.error(f"  {missing_package} is not installed.")
    print("\nInstall with:")
    print("  pip install passguard")
    time.sleep(3)
    sys.exit(1)

logger = logging.getLogger(__name__)

CLASS_PROMPTS = (
    (CharsetClass.LOWER, "lower case"),
    (CharsetClass.UPPER, "upper case"),
    (CharsetClass.DIGIT, "numbers"),
    (CharsetClass.SYMBOL, "symbols"),
)

# ==============================================================
# Functions
# ==============================================================

def ask_generator_config() -> GeneratorConfig | None:
    """
    Prompt for a customised generator config.

    Returns:
        The config, or None if the user quits.
    """
    length = get_int(
        f"\n  Enter desired length ({PASS_DEFAULTS['min_length']}-"
        f"{PASS_DEFAULTS['max_length']}, Enter for default of "
        f"{PASS_DEFAULTS['length']}): ",
        default=PASS_DEFAULTS["length"],
    )
    if length is None:
        return None

    classes = CharsetClass.NONE
    for cls, label in CLASS_PROMPTS:
        if get_yes_no(f"  Include {label}?"):
            classes |= cls

    include = input("  Extra characters to allow (Enter for none): ")
    exclude = input("  Characters to exclude (Enter for none): ")

    return (GeneratorConfig()
            .set_length(length)
            .set_active_classes(classes)
            .include_charset(include)
            .exclude_charset(exclude))


def show_generated(config: GeneratorConfig) -> None:
    try:
        pw = PasswordGenerator(config).generate()
    except CharsetError as e:
        logger.error(f"[{timestamp()}] Generation failed: {e}")
        print(f"\n  {e}")
        return

    print(f"\n Generated: {pw}")
    copy_to_clipboard(pw)


def show_report(password: str, word_lists: WordLists) -> None:
    report = strength_report(password, word_lists,
                             HashAlgorithmDifficulty.ARGON2ID_64MB_T3)

    print(SEP_LG)
    print(f" Classification : {report['classification']}")
    print(f" Strength (0-1) : {report['strength']:.2f}  ({report['bits']:.1f} bits)")
    if report["zxcvbn_score"] is not None:
        print(f" zxcvbn (0-4)   : {report['zxcvbn_score']}")
    if report["warning"]:
        print(f"\n Warning: {report['warning']}")
    if report["suggestions"]:
        print("\n Suggestions:")
        for suggestion in report["suggestions"]:
            print(f"  {suggestion}")

    print("\n Crack times (Argon2id 64MB, t=3):")
    print(SEP_SM)
    for speed, duration in report["crack_times"].items():
        print(f"  {speed:<11} : {duration}")
    print(SEP_LG)


def main_menu(word_lists: WordLists, hasher: PasswordHasher) -> None:
    while True:
        print(f"\n{SEP_LG}")
        print(f" passguard v{VERSION}")
        print(SEP_LG)
        print("  1. Generate password")
        print("  2. Generate custom password")
        print("  3. Hash password")
        print("  4. Verify password")
        print("  5. Check password strength")
        print("  6. Quit")
        choice = input("\n → ").strip().lower()

        # == GENERATE =========================================
        if choice == "1":
            show_generated(GeneratorConfig())

        elif choice == "2":
            config = ask_generator_config()
            if config is None:
                continue
            show_generated(config)

        # == HASH =============================================
        elif choice == "3":
            pw = getpass.getpass(" Password to hash: ")
            print("\n Hashing...")
            print(f"\n {hasher.hash(pw)}")

        # == VERIFY ===========================================
        elif choice == "4":
            encoded = input(" Encoded hash: ").strip()
            pw = getpass.getpass(" Password: ")
            if hasher.verify(encoded, pw):
                print("\n Password matches.")
            else:
                print("\n Password does NOT match (or hash is malformed).")

        # == STRENGTH =========================================
        elif choice == "5":
            pw = getpass.getpass(" Password to check: ")
            show_report(pw, word_lists)

        # == QUIT =============================================
        elif choice in ("6", "q"):
            print("Goodbye!")
            return

        else:
            print("Invalid Choice")


def main() -> int:
    setup_logging()

    try:
        word_lists = load_word_lists()
    except WordListError as e:
        print(f"\n {e}", file=sys.stderr)
        return 1

    main_menu(word_lists, PasswordHasher.default())
    return 0


if __name__ == "__main__":
    sys.exit(main())
