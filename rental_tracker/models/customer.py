from pydantic import BaseModel, ConfigDict


class Customer(BaseModel):
    customerId: int
    name:       str

    model_config = ConfigDict(frozen=True)

    def __repr__(self):
        return f"<Customer id={self.customerId} name={self.name}>"
