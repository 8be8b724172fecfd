"""Example: run the three chat-server demos (in-memory, single process)."""

from dotenv import load_dotenv

load_dotenv()

from chatcast.demo import main


if __name__ == "__main__":
    raise SystemExit(main())
