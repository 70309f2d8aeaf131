import pytest
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from service_common import DomainError, DomainValidationError, GlobalExceptionHandlerBase


class PatientNotFoundError(DomainError):
    """Raised when a patient does not exist."""

    pass


class InvalidCredentialsError(DomainError):
    """Raised when a caller cannot be authenticated."""

    pass


class PatientCreate(BaseModel):
    name: str = Field(min_length=1)
    age: int = Field(gt=0)


class HospitalExceptionHandler(GlobalExceptionHandlerBase):
    """Handler a consuming service would write: base rules plus its own domain errors."""

    def rules(self):
        return [
            (PatientNotFoundError, self.handle_input_not_found_errors),
            (InvalidCredentialsError, self.handle_unauthorized_errors),
            *super().rules(),
        ]


def create_app() -> FastAPI:
    app = FastAPI()
    HospitalExceptionHandler().register(app)

    @app.get("/patients/{patient_id}")
    def get_patient(patient_id: int):
        raise PatientNotFoundError(f"PatientNotFound: id {patient_id}")

    @app.post("/patients", status_code=status.HTTP_201_CREATED)
    def create_patient(patient: PatientCreate):
        return patient

    @app.post("/patients/validate")
    def validate_patient():
        raise RequestValidationError(
            [
                {"loc": ("body", "name"), "msg": "must not be blank", "type": "value_error"},
                {"loc": ("body", "age"), "msg": "must be positive", "type": "value_error"},
            ]
        )

    @app.post("/patients/import")
    def import_patient():
        # Validation failing inside service code rather than at request binding
        PatientCreate(name="", age=-1)

    @app.post("/appointments")
    def create_appointment():
        raise DomainValidationError("Start date must be before end date")

    @app.get("/me")
    def me():
        raise InvalidCredentialsError("Invalid token")

    @app.get("/admin")
    def admin():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.get("/reports")
    def reports():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not enough permissions")

    @app.get("/upstream")
    def upstream():
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Upstream down")

    @app.get("/boom")
    def boom():
        raise RuntimeError("Unexpected failure while loading ward")

    return app


@pytest.fixture(scope="function")
def app() -> FastAPI:
    return create_app()


@pytest.fixture(scope="function")
def client(app: FastAPI):
    """Test client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def make_request():
    """Build a bare request for the given path."""

    def _make_request(path: str, method: str = "GET") -> Request:
        return Request(
            {
                "type": "http",
                "method": method,
                "scheme": "http",
                "server": ("testserver", 80),
                "path": path,
                "root_path": "",
                "query_string": b"",
                "headers": [],
            }
        )

    return _make_request
