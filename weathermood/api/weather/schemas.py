from pydantic import BaseModel


class WeatherResponse(BaseModel):
    city: str
    temp: int
    condition: str
    humidity: int
