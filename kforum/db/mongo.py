# kforum/db/mongo.py
from motor.motor_asyncio import AsyncIOMotorClient
from dotenv import load_dotenv
import os

load_dotenv()

# Motor connects lazily, so importing this module never touches the network.
MONGO_URL = os.getenv("MONGODB_URL", "mongodb://localhost:27017")
MONGO_DB = os.getenv("MONGODB_DB", "kforum")

client = AsyncIOMotorClient(MONGO_URL)
db = client[MONGO_DB]

# Collections
users_collection = db["users"]                       # carries embedded wordle_streak
posts_collection = db["posts"]
comments_collection = db["comments"]

# Daily word game
daily_words_collection = db["daily_words"]           # one per calendar day
wordle_attempts_collection = db["wordle_attempts"]   # one per (user, day)


# Call once at startup to ensure indexes exist.
async def init_db_indexes() -> None:
    await users_collection.create_index("email", unique=True, sparse=True)
    # Leaderboard scan
    await users_collection.create_index([("wordle_streak.current", -1)])

    # Feed + review queue
    await posts_collection.create_index([("status", 1), ("created_at", -1)])
    await posts_collection.create_index([("category", 1), ("status", 1), ("created_at", -1)])
    await posts_collection.create_index("author_id")
    await comments_collection.create_index([("post_id", 1), ("created_at", 1)])

    # Wordle: the unique keys are what make lazy creation race-safe
    await daily_words_collection.create_index("date", unique=True, name="date_unique")
    await wordle_attempts_collection.create_index(
        [("user_id", 1), ("date", 1)],
        unique=True,
        name="user_date_unique",
    )
    await wordle_attempts_collection.create_index([("user_id", 1), ("won", 1)])
