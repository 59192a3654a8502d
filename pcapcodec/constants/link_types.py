# Link-layer header type codes, as stored in the ``network`` field
# of the file header.
#
# See: https://www.tcpdump.org/linktypes.html
#
# The codes are opaque to the codec itself; they are only used to
# give a human readable description of a capture.

LINKTYPE_NULL = 0  # BSD loopback encapsulation
LINKTYPE_ETHERNET = 1  # IEEE 802.3 Ethernet
LINKTYPE_AX25 = 3
LINKTYPE_IEEE802_5 = 6  # Token Ring
LINKTYPE_ARCNET_BSD = 7
LINKTYPE_SLIP = 8
LINKTYPE_PPP = 9
LINKTYPE_FDDI = 10
LINKTYPE_PPP_HDLC = 50
LINKTYPE_PPP_ETHER = 51
LINKTYPE_ATM_RFC1483 = 100
LINKTYPE_RAW = 101  # Raw IPv4 or IPv6, no link-layer header
LINKTYPE_C_HDLC = 104
LINKTYPE_IEEE802_11 = 105
LINKTYPE_FRELAY = 107
LINKTYPE_LOOP = 108  # OpenBSD loopback
LINKTYPE_LINUX_SLL = 113  # Linux "cooked" capture
LINKTYPE_LTALK = 114
LINKTYPE_PFLOG = 117
LINKTYPE_IEEE802_11_PRISM = 119
LINKTYPE_IP_OVER_FC = 122
LINKTYPE_SUNATM = 123
LINKTYPE_IEEE802_11_RADIOTAP = 127
LINKTYPE_ARCNET_LINUX = 129
LINKTYPE_APPLE_IP_OVER_IEEE1394 = 138
LINKTYPE_MTP2_WITH_PHDR = 139
LINKTYPE_MTP2 = 140
LINKTYPE_MTP3 = 141
LINKTYPE_SCCP = 142
LINKTYPE_DOCSIS = 143
LINKTYPE_LINUX_IRDA = 144

# Reserved for private use, DLT_USER0 to DLT_USER15
LINKTYPE_USER0 = 147
LINKTYPE_USER15 = 162

LINKTYPE_IEEE802_11_AVS = 163
LINKTYPE_BACNET_MS_TP = 165
LINKTYPE_PPP_PPPD = 166
LINKTYPE_GPRS_LLC = 169
LINKTYPE_LINUX_LAPD = 177
LINKTYPE_BLUETOOTH_HCI_H4 = 187
LINKTYPE_USB_LINUX = 189
LINKTYPE_PPI = 192
LINKTYPE_IEEE802_15_4 = 195
LINKTYPE_SITA = 196
LINKTYPE_ERF = 197
LINKTYPE_BLUETOOTH_HCI_H4_WITH_PHDR = 201
LINKTYPE_AX25_KISS = 202
LINKTYPE_LAPD = 203
LINKTYPE_PPP_WITH_DIR = 204
LINKTYPE_C_HDLC_WITH_DIR = 205
LINKTYPE_FRELAY_WITH_DIR = 206
LINKTYPE_IPMB_LINUX = 209
LINKTYPE_IEEE802_15_4_NONASK_PHY = 215
LINKTYPE_USB_LINUX_MMAPPED = 220
LINKTYPE_FC_2 = 224
LINKTYPE_FC_2_WITH_FRAME_DELIMS = 225
LINKTYPE_IPNET = 226
LINKTYPE_CAN_SOCKETCAN = 227
LINKTYPE_IPV4 = 228
LINKTYPE_IPV6 = 229
LINKTYPE_IEEE802_15_4_NOFCS = 230
LINKTYPE_DBUS = 231
LINKTYPE_DVB_CI = 235
LINKTYPE_MUX27010 = 236
LINKTYPE_STANAG_5066_D_PDU = 237
LINKTYPE_NFLOG = 239
LINKTYPE_NETANALYZER = 240
LINKTYPE_NETANALYZER_TRANSPARENT = 241
LINKTYPE_IPOIB = 242
LINKTYPE_MPEG_2_TS = 243
LINKTYPE_NG40 = 244
LINKTYPE_NFC_LLCP = 245
LINKTYPE_INFINIBAND = 247
LINKTYPE_SCTP = 248
LINKTYPE_USBPCAP = 249
LINKTYPE_RTAC_SERIAL = 250
LINKTYPE_BLUETOOTH_LE_LL = 251
LINKTYPE_NETLINK = 253
LINKTYPE_BLUETOOTH_LINUX_MONITOR = 254
LINKTYPE_BLUETOOTH_BREDR_BB = 255
LINKTYPE_BLUETOOTH_LE_LL_WITH_PHDR = 256
LINKTYPE_PROFIBUS_DL = 257
LINKTYPE_PKTAP = 258
LINKTYPE_EPON = 259
LINKTYPE_IPMI_HPM_2 = 260
LINKTYPE_ZWAVE_R1_R2 = 261
LINKTYPE_ZWAVE_R3 = 262
LINKTYPE_WATTSTOPPER_DLM = 263
LINKTYPE_ISO_14443 = 264
LINKTYPE_RDS = 265
LINKTYPE_USB_DARWIN = 266


LINKTYPE_DESCRIPTIONS = {
    LINKTYPE_NULL: "BSD loopback devices, except for later OpenBSD",
    LINKTYPE_ETHERNET: "Ethernet, and Linux loopback devices",
    LINKTYPE_AX25: "AX.25 packet",
    LINKTYPE_IEEE802_5: "IEEE 802.5 Token Ring",
    LINKTYPE_ARCNET_BSD: "ARCNET, with BSD-style header",
    LINKTYPE_SLIP: "Serial Line IP",
    LINKTYPE_PPP: "Point-to-point Protocol",
    LINKTYPE_FDDI: "FDDI",
    LINKTYPE_PPP_HDLC: "PPP in HDLC-like framing",
    LINKTYPE_PPP_ETHER: "PPPoE",
    LINKTYPE_ATM_RFC1483: "RFC 1483 LLC/SNAP-encapsulated ATM",
    LINKTYPE_RAW: "Raw IPv4 or IPv6",
    LINKTYPE_C_HDLC: "Cisco PPP with HDLC framing",
    LINKTYPE_IEEE802_11: "IEEE 802.11 wireless",
    LINKTYPE_FRELAY: "Frame Relay",
    LINKTYPE_LOOP: "OpenBSD loopback devices",
    LINKTYPE_LINUX_SLL: "Linux cooked sockets",
    LINKTYPE_LTALK: "Apple LocalTalk",
    LINKTYPE_PFLOG: "OpenBSD pflog",
    LINKTYPE_IEEE802_11_PRISM: "802.11 plus Prism header",
    LINKTYPE_IP_OVER_FC: "RFC 2625 IP-over-Fibre Channel",
    LINKTYPE_SUNATM: "Solaris+SunATM",
    LINKTYPE_IEEE802_11_RADIOTAP: "802.11 plus radiotap header",
    LINKTYPE_ARCNET_LINUX: "ARCNET, with Linux-style header",
    LINKTYPE_APPLE_IP_OVER_IEEE1394: "Apple IP-over-IEEE 1394 cooked header",
    LINKTYPE_DOCSIS: "DOCSIS MAC frames",
    LINKTYPE_LINUX_IRDA: "Linux-IrDA",
    LINKTYPE_IEEE802_11_AVS: "802.11 plus AVS radio header",
    LINKTYPE_BLUETOOTH_HCI_H4: "Bluetooth HCI UART transport layer",
    LINKTYPE_USB_LINUX: "USB packets, with Linux USB header",
    LINKTYPE_PPI: "Per-Packet Information header",
    LINKTYPE_IEEE802_15_4: "IEEE 802.15.4 wireless PAN",
    LINKTYPE_ERF: "Endace ERF records",
    LINKTYPE_USB_LINUX_MMAPPED: "USB packets, with Linux memory-mapped USB header",
    LINKTYPE_CAN_SOCKETCAN: "Controller Area Network frames, SocketCAN header",
    LINKTYPE_IPV4: "Raw IPv4",
    LINKTYPE_IPV6: "Raw IPv6",
    LINKTYPE_DBUS: "D-Bus messages",
    LINKTYPE_NFLOG: "Linux netlink NETLINK NFLOG socket log messages",
    LINKTYPE_MPEG_2_TS: "MPEG-2 Transport Stream packets",
    LINKTYPE_INFINIBAND: "InfiniBand data packets",
    LINKTYPE_SCTP: "SCTP packets, without lower-level protocols",
    LINKTYPE_USBPCAP: "USB packets, with USBPcap header",
    LINKTYPE_BLUETOOTH_LE_LL: "Bluetooth Low Energy link-layer packets",
    LINKTYPE_NETLINK: "Linux Netlink capture encapsulation",
    LINKTYPE_PKTAP: "Apple PKTAP capture encapsulation",
    LINKTYPE_EPON: "Ethernet-over-passive-optical-network packets",
    LINKTYPE_USB_DARWIN: "USB packets, with Darwin (macOS, etc.) header",
}
LINKTYPE_DESCRIPTIONS.update(
    (code, "Reserved for private use")
    for code in range(LINKTYPE_USER0, LINKTYPE_USER15 + 1)
)
