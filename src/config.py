import logging
import os

# ----------------------------
# Agent identifiers (opaque, never parsed)
# ----------------------------
AGENT_CONTENT_CREATOR = "699c8e86948869a40a159e90"
AGENT_HASHTAG_GENERATOR = "699c8e86dec8777541dad1da"
AGENT_POST_SCHEDULER = "699c8e875e640bb8aab129db"
AGENT_ANALYTICS_ADVISOR = "699c8e8790171ae9b4817d03"

AGENT_NAMES = {
    AGENT_CONTENT_CREATOR: "Content Creator",
    AGENT_HASHTAG_GENERATOR: "Hashtag Generator",
    AGENT_POST_SCHEDULER: "Post Scheduler",
    AGENT_ANALYTICS_ADVISOR: "Analytics Advisor",
}

# ----------------------------
# Environment
# ----------------------------
AGENT_API_URL = os.environ.get("AGENT_API_URL", "http://localhost:8080/api/agent")
AGENT_API_KEY = os.environ.get("AGENT_API_KEY")  # optional bearer token

DB_PATH = os.environ.get("FOUNDERPOST_DB_PATH", "data/founderpost.db")
BRAND_VOICE_KEY = "founderpost_brand_voice"

# Seconds an acknowledgement stays visible
COPY_ACK_SECONDS = 2.0
SAVE_ACK_SECONDS = 2.5

NETWORK_ERROR_MESSAGE = "Network error. Please try again."


def log_level() -> int:
    name = (os.environ.get("LOG_LEVEL") or "DEBUG").strip().upper()
    return getattr(logging, name, logging.DEBUG)
