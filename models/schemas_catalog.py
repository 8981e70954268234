from pydantic import BaseModel

class RegionOut(BaseModel):
    id: int
    name: str
    class Config:
        from_attributes = True

class SubRegionOut(BaseModel):
    id: int
    name: str
    region_id: int | None
    class Config:
        from_attributes = True

class InstitutionOut(BaseModel):
    id: int
    name: str
    category: str
    class Config:
        from_attributes = True

class ProgramOut(BaseModel):
    id: int
    name: str
    riasec_code: str
    class Config:
        from_attributes = True
