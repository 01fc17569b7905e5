"""
Database table definitions and it stores:
- Flow traces (one row per flow run)
Main purpose:
Let developers inspect what was sent to the model and what came back.
"""



from sqlalchemy import String, Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from finmitra.db.base import Base

class FlowTrace(Base):
    __tablename__ = "flow_traces"
    id: Mapped[str] = mapped_column(String, primary_key=True)
    flow: Mapped[str] = mapped_column(String, index=True)
    status: Mapped[str] = mapped_column(String, default="ok")  # ok|error
    input: Mapped[str] = mapped_column(Text, default="")
    output: Mapped[str] = mapped_column(Text, default="")
    error: Mapped[str] = mapped_column(Text, default="")
    duration_ms: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)
