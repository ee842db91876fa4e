# core/db.py
import logging

import certifi
import streamlit as st
from pymongo import MongoClient

from core.config import mongo_uri, db_name

logger = logging.getLogger(__name__)


@st.cache_resource
def get_db():
    uri = mongo_uri()
    dbname = db_name()
    if not uri:
        st.error("MONGO_URI is not configured.")
        st.stop()
    try:
        client = MongoClient(uri, serverSelectionTimeoutMS=8000, tlsCAFile=certifi.where())
        client.admin.command("ping")
        logger.info("Connected to MongoDB database %s", dbname)
        return client[dbname]
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        st.error(f"Could not connect to MongoDB: {e}")
        st.stop()


def users_collection():
    return get_db()["users"]
