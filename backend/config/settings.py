# Runtime settings for the daily health tips job, read once from the
# environment (or a local .env file) as module-level constants.

import os

from dotenv import load_dotenv

load_dotenv()

# Supabase credentials (service key, the job reads every user row)
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY")

# Table names
TIPS_TABLE = os.getenv("TIPS_TABLE", "health_tips")
USERS_TABLE = os.getenv("USERS_TABLE", "users")

# Users read per page
USER_PAGE_SIZE = int(os.getenv("USER_PAGE_SIZE", "1000"))

# FCM throttling: messages per sub-batch and pause between sub-batches
PUSH_BATCH_SIZE = int(os.getenv("PUSH_BATCH_SIZE", "100"))
PUSH_BATCH_DELAY_SECONDS = float(os.getenv("PUSH_BATCH_DELAY_SECONDS", "0.1"))

# Handler the Flutter app registers for notification taps
TIP_CLICK_ACTION = os.getenv("TIP_CLICK_ACTION", "FLUTTER_NOTIFICATION_CLICK")

# Timezone the scheduler triggers the job in (09:00 local)
RUN_TIMEZONE = os.getenv("RUN_TIMEZONE", "Africa/Cairo")

# Service account JSON for firebase-admin; None falls back to default credentials
FIREBASE_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
