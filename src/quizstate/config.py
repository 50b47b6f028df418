class Settings:
    PROJECT_NAME: str = "quizstate"
    DEBUG: bool = False
    HOST: str = "localhost"
    PORT: int = 3000
    VALIDATION_URL: str = "http://localhost:3000/validate-question"
    LOG_DIR: str = "log"
    LOG_FILE: str = "quizstate.log"
    LOG_TO_FILE: bool = False
    LOG_LEVEL: str = "INFO"
    QUESTION_DIR: str = "questions"


settings = Settings()
