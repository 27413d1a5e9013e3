import asyncio
import json
import logging
import sys

from sport_banter.tool import run_sport_banter_tool

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Message from the command line, e.g. python main.py "Did Liverpool win yesterday?"
user_message = " ".join(sys.argv[1:]) or "Give me a random sports fact"

result = asyncio.run(run_sport_banter_tool({"userMessage": user_message}))

print(json.dumps(result, indent=2, ensure_ascii=False))
