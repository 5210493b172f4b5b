import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

class Config:
    BASE_DIR = Path(__file__).parent.parent
    LOGS_DIR = BASE_DIR / "logs"
    
    COCKTAILDB_BASE_URL = os.getenv("COCKTAILDB_BASE_URL", "https://www.thecocktaildb.com/api/json/v1/1")
    
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
    MAX_RETRIES = int(os.getenv("MAX_RETRIES", "3"))
    RETRY_BASE_DELAY = float(os.getenv("RETRY_BASE_DELAY", "0.5"))
    
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE", str(LOGS_DIR / "mixmaster.log"))
    
    # Upstream slots are strIngredient1..15 / strMeasure1..15
    MAX_INGREDIENT_SLOTS = 15
    
    def create_directories(self):
        if self.LOG_FILE:
            Path(self.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)

config = Config()
