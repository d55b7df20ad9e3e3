from supabase import create_client, Client

from config.settings import SUPABASE_SERVICE_KEY, SUPABASE_URL


def get_supabase_client() -> Client:
    """Get initialized Supabase client."""
    if not SUPABASE_URL or not SUPABASE_SERVICE_KEY:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set")

    return create_client(SUPABASE_URL, SUPABASE_SERVICE_KEY)
