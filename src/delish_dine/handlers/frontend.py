"""Single-page frontend served for every non-API path."""

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <title>Delish Dine Restaurant</title>
  <style>
    body { font-family: Arial, sans-serif; background: #f9f6f2; margin: 0; }
    header { background: #a9441b; color: #fff; text-align: center; padding: 20px; }
    header h3 { font-style: italic; color: #ffddb6; }
    section { width: 60%; margin: 30px auto; background: #ffe7cc; padding: 20px; border-radius: 8px; }
    section h2, section h3 { text-align: center; color: #a9441b; }
    table { width: 100%; border-collapse: collapse; }
    th, td { border: 1px solid #a9441b; padding: 8px; text-align: center; background: #fff8f2; }
    input, textarea, select { width: 95%; padding: 8px; margin: 6px 0; border: 1px solid #a9441b; border-radius: 4px; }
    button { padding: 10px 16px; background: #a9441b; color: #fff; border: none; border-radius: 4px; cursor: pointer; }
    .item { background: #fff; border: 1px solid #a9441b; border-radius: 6px; padding: 8px; margin: 6px 0; }
  </style>
</head>
<body>
  <header>
    <h1>Delish Dine Restaurant</h1>
    <h3>Taste that touches your heart</h3>
  </header>

  <section>
    <h2>Our Menu</h2>
    <table id="menuTable">
      <thead><tr><th>Dish</th><th>Type</th><th>Price</th></tr></thead>
      <tbody></tbody>
    </table>
  </section>

  <section>
    <h3>Contact Us</h3>
    <form id="contactForm">
      <input id="name" placeholder="Your name" />
      <input id="email" type="email" placeholder="Your email" />
      <textarea id="message" placeholder="Your message"></textarea>
      <button type="submit">Send Message</button>
    </form>
    <div id="contactStatus"></div>
  </section>

  <section>
    <h3>Place Order</h3>
    <input id="orderCustomer" placeholder="Customer name (optional)" />
    <select id="orderItem"></select>
    <input id="orderQty" type="number" min="1" value="1" />
    <button id="addToOrder">Add to order</button>
    <button id="submitOrder">Submit order</button>
    <div id="orderCart"></div>
    <h3>Recent Orders</h3>
    <div id="ordersList"></div>
  </section>

  <section>
    <h3>Create Reservation</h3>
    <input id="resName" placeholder="Customer name" />
    <input id="resPhone" placeholder="Phone" />
    <input id="resTable" type="number" min="1" value="1" />
    <input id="resAt" type="datetime-local" />
    <textarea id="resNotes" placeholder="Special requests"></textarea>
    <button id="submitRes">Create reservation</button>
    <h3>Reservations</h3>
    <div id="resList"></div>
  </section>

  <script>
    const cart = [];
    const api = (path, options) => fetch("/api" + path, options)
      .then(async r => ({ ok: r.ok, data: await r.json().catch(() => ({})) }));
    const post = (path, body) => api(path, {
      method: "POST", headers: { "Content-Type": "application/json" }, body: JSON.stringify(body)
    });
    const $ = id => document.getElementById(id);

    async function loadMenu() {
      const { data } = await api("/menu");
      document.querySelector("#menuTable tbody").innerHTML = data.map(
        m => `<tr><td>${m.name}</td><td>${m.type}</td><td>Rs. ${m.price}</td></tr>`).join("");
      $("orderItem").innerHTML = data.map(
        m => `<option value="${m.id}">${m.name} (Rs. ${m.price})</option>`).join("");
    }

    async function loadOrders() {
      const { data } = await api("/orders");
      $("ordersList").innerHTML = data.map(o => `<div class="item"><b>Order ${o.id}</b> - ${o.customer_name || "Walk-in"} - ${o.status}<br/>` +
        o.items.map(i => `#${i.menu_item_id} x${i.quantity}`).join(", ") + "</div>").join("");
    }

    async function loadReservations() {
      const { data } = await api("/reservations");
      $("resList").innerHTML = data.map(r => `<div class="item"><b>Res ${r.id}</b> - ${r.customer_name} - Table ${r.table_no} - ${r.reserved_at}</div>`).join("");
    }

    function renderCart() {
      $("orderCart").innerHTML = cart.length
        ? cart.map((c, i) => `<div class="item">Item #${i + 1}: ID ${c.menu_item_id}, Qty ${c.quantity}</div>`).join("")
        : `<div class="item">No items in order.</div>`;
    }

    document.addEventListener("DOMContentLoaded", () => {
      loadMenu(); loadOrders(); loadReservations(); renderCart();

      $("contactForm").addEventListener("submit", async e => {
        e.preventDefault();
        const { data } = await post("/contact", { name: $("name").value.trim(), email: $("email").value.trim(), message: $("message").value.trim() });
        $("contactStatus").innerHTML = `<div class="item">${data.message || data.error}</div>`;
      });

      $("addToOrder").addEventListener("click", () => {
        cart.push({ menu_item_id: parseInt($("orderItem").value, 10), quantity: Math.max(1, parseInt($("orderQty").value, 10) || 1) });
        renderCart();
      });

      $("submitOrder").addEventListener("click", async () => {
        if (!cart.length) { alert("Add at least one item."); return; }
        const { ok, data } = await post("/orders", { customer_name: $("orderCustomer").value.trim() || undefined, items: cart });
        alert(ok ? "Order placed: #" + data.order_id : "Order error: " + data.error);
        if (ok) { cart.length = 0; renderCart(); loadOrders(); }
      });

      $("submitRes").addEventListener("click", async () => {
        const { ok, data } = await post("/reservations", {
          customer_name: $("resName").value.trim(), phone: $("resPhone").value.trim() || undefined,
          table_no: parseInt($("resTable").value, 10), reserved_at: $("resAt").value,
          notes: $("resNotes").value.trim() || undefined
        });
        alert(ok ? "Reservation created: #" + data.id : "Reservation error: " + data.error);
        if (ok) loadReservations();
      });
    });
  </script>
</body>
</html>
"""
